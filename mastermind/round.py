"""
One round of Mastermind: a hidden answer and up to 12 guesses at it.

The round only keeps score. Asking the player for input and printing clues is
the driver's job (see cli.py).
"""

import logging
from typing import List, Optional, Tuple

from .engine import evaluate
from .errors import RoundAlreadyCompleteError
from .rules import DEFAULT_RULES, Rules
from .schemas import Clue, Code, GuessEntry
from .types import RoundStatus

logger = logging.getLogger(__name__)


class Round:
    def __init__(self, answer: Optional[Code] = None, rules: Rules = DEFAULT_RULES) -> None:
        self._rules = rules
        self._answer = answer if answer is not None else Code.generate_random()
        self._guess_count = 0
        self._complete = False
        self._won = False
        self._history: List[GuessEntry] = []
        logger.debug("New round: %d turns, answer %s", rules.turns_per_round, self._answer)

    @property
    def answer(self) -> Code:
        return self._answer

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def guess_count(self) -> int:
        return self._guess_count

    @property
    def remaining_guesses(self) -> int:
        return max(0, self._rules.turns_per_round - self._guess_count)

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def is_won(self) -> bool:
        return self._won

    @property
    def is_lost(self) -> bool:
        return self._complete and not self._won

    @property
    def status(self) -> RoundStatus:
        if not self._complete:
            return "in_progress"
        return "won" if self._won else "lost"

    @property
    def history(self) -> Tuple[GuessEntry, ...]:
        return tuple(self._history)

    @property
    def last_clue(self) -> Optional[Clue]:
        return self._history[-1].clue if self._history else None

    def submit_guess(self, guess: Code) -> Clue:
        """
        Score one guess and advance the round.

        The round completes on the guess that scores all exact matches, or on the
        last allowed guess, whichever comes first. Once complete it stays complete
        and any further guess raises RoundAlreadyCompleteError.
        """
        if self._complete:
            raise RoundAlreadyCompleteError(self._guess_count)

        self._guess_count += 1
        clue = evaluate(guess, self._answer, self._rules)
        self._history.append(GuessEntry(turn=self._guess_count, guess=guess, clue=clue))
        logger.debug(
            "Guess %d: %s -> (exact, color) %s", self._guess_count, guess, clue.as_tuple()
        )

        if clue.is_win:
            self._won = True
            self._complete = True
        elif self._guess_count >= self._rules.turns_per_round:
            self._complete = True

        if self._complete:
            logger.debug("Round %s after %d guess(es)", self.status, self._guess_count)
        return clue
