'''
Terminal Mastermind

Flow:
- print the instructions
- ask for a guess until the text is 4 digits between 0 and 5
- submit it to the Round, print the guess and its clue
- stop when the round is complete, say win or lose and show the answer
- offer another round; print the session scoreboard on the way out

Settings come from the environment (see config.py); --no-color overrides them.
'''

import argparse
import logging
import re
import sys
from typing import Callable, List, Optional

from .config import get_settings
from .render import render_clue, render_code, render_marker
from .round import Round
from .rules import DEFAULT_RULES
from .schemas import Code
from .scoreboard import Scoreboard, Stats

logger = logging.getLogger(__name__)

Reader = Callable[[], str]
Writer = Callable[[str], None]

# Anchored: the whole line must be the 4 digits, nothing before or after
GUESS_PATTERN = re.compile(r"[0-5]{4}")


def configure_logging(level: int = logging.WARNING) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"))
    package_logger = logging.getLogger("mastermind")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def parse_guess(text: str) -> Optional[Code]:
    """
    "0044\\n" -> Code(0, 0, 4, 4)
    "0046", "00 44", "00445" -> None
    """
    cleaned = text.strip()
    if not GUESS_PATTERN.fullmatch(cleaned):
        return None
    return Code.from_digits(int(c) for c in cleaned)


def ask_guess(round_: Round, read: Reader = input, write: Writer = print) -> Code:
    prompt = (
        f"Round #{round_.guess_count + 1}: What will be your guess? "
        f"Choose four numbers between 0 - {DEFAULT_RULES.max_digit}."
    )
    write(prompt)
    guess = parse_guess(read())
    while guess is None:
        logger.debug("Rejected guess input on turn %d", round_.guess_count + 1)
        write(f"Incorrect format. {prompt} Example of the format is 0044.")
        guess = parse_guess(read())
    return guess


def print_instructions(write: Writer = print, color: bool = True) -> None:
    exact = render_marker(DEFAULT_RULES.exact_symbol, color)
    partial = render_marker(DEFAULT_RULES.color_symbol, color)
    write("This is the game of Mastermind.")
    write(
        f"You have {DEFAULT_RULES.turns_per_round} rounds to guess the correct code. "
        "Each time you guess, you will receive feedback on the number of colors and positions "
        "you have guessed correctly as well as the number of colors you have guessed correctly."
    )
    write(
        f"For each correct color and position, you will see a {exact}. "
        f"And for each color you have correct, you will see a {partial}. \n"
    )


def announce_result(round_: Round, write: Writer = print, color: bool = True) -> None:
    answer = render_code(round_.answer, color)
    if round_.is_won:
        write(f"You win! The code was {answer}")
    else:
        write(f"You lose :(. The code was {answer}")


def play_round(
    read: Reader = input,
    write: Writer = print,
    color: bool = True,
    round_: Optional[Round] = None,
) -> Round:
    print_instructions(write, color)
    if round_ is None:
        round_ = Round()

    while not round_.is_complete:
        guess = ask_guess(round_, read, write)
        clue = round_.submit_guess(guess)
        write(f"{render_code(guess, color)}  Clues: {render_clue(clue, color)}")

    announce_result(round_, write, color)
    return round_


def print_stats(stats: Stats, write: Writer = print) -> None:
    write(
        f"Rounds played: {stats.rounds_started}  Won: {stats.rounds_won}  Lost: {stats.rounds_lost}"
    )
    write(f"Current streak: {stats.current_streak}  Best streak: {stats.best_streak}")
    if stats.average_guesses_to_win is not None:
        write(
            f"Average guesses to win: {stats.average_guesses_to_win:.1f}  "
            f"Fastest win: {stats.fastest_win_guesses}"
        )


def ask_play_again(read: Reader = input, write: Writer = print) -> bool:
    write("Play again? (y/n)")
    answer = read().strip().lower()
    while answer not in ("y", "yes", "n", "no"):
        write("Please answer y or n.")
        answer = read().strip().lower()
    return answer in ("y", "yes")


def run_session(
    read: Reader = input,
    write: Writer = print,
    color: bool = True,
    scoreboard: Optional[Scoreboard] = None,
) -> Scoreboard:
    if scoreboard is None:
        scoreboard = Scoreboard()
    try:
        while True:
            scoreboard.record(play_round(read, write, color))
            if not ask_play_again(read, write):
                break
    finally:
        print_stats(scoreboard.get_stats(), write)
    return scoreboard


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mastermind", description="Play Mastermind in the terminal.")
    parser.add_argument("--no-color", action="store_true", help="print plain digits and x/o markers")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    color = settings.color and not args.no_color

    try:
        run_session(read=input, write=print, color=color)
    except EOFError:
        print()
        logger.info("Input closed, ending session")
        return 0
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
