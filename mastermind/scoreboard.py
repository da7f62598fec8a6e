"""
Session scoreboard
Tallies finished rounds while the program runs. Nothing is saved; a new
session starts from zero.
"""

from dataclasses import dataclass
from typing import Optional
from weakref import WeakSet

from .round import Round


@dataclass
class Stats:
    rounds_started: int = 0
    rounds_won: int = 0
    rounds_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_guesses: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.rounds_won == 0:
            return None
        return self.total_guesses_in_wins / self.rounds_won


class Scoreboard:
    def __init__(self) -> None:
        self._stats = Stats()
        self._recorded: "WeakSet[Round]" = WeakSet()

    def record(self, round_: Round) -> Stats:
        """
        Count one finished round. Raises ValueError for a round that is still in
        progress or has already been counted.
        """
        if not round_.is_complete:
            raise ValueError("Only a complete round can be recorded.")
        if round_ in self._recorded:
            raise ValueError("This round has already been recorded.")
        self._recorded.add(round_)

        self._stats.rounds_started += 1
        if round_.is_won:
            self._stats.rounds_won += 1

            # streaks
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            # guesses used
            guesses_used = round_.guess_count
            self._stats.total_guesses_in_wins += guesses_used
            if self._stats.fastest_win_guesses is None or guesses_used < self._stats.fastest_win_guesses:
                self._stats.fastest_win_guesses = guesses_used
        else:
            self._stats.rounds_lost += 1
            self._stats.current_streak = 0
        return self._stats

    def get_stats(self) -> Stats:
        return self._stats

    def reset(self) -> None:
        self._stats = Stats()
        self._recorded = WeakSet()
