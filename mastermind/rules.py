"""
Fixed rules of the game.

Code length, alphabet and round length are constants of the design, not player
settings. They live in one frozen object that gets handed to the parts that need
them, so tests can read the same numbers the game uses.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rules:
    code_length: int = 4       # positions in a code
    alphabet_size: int = 6     # digits 0 -> 5
    turns_per_round: int = 12  # guesses before the round is lost
    exact_symbol: str = "x"    # right digit, right place
    color_symbol: str = "o"    # right digit, wrong place

    @property
    def max_digit(self) -> int:
        return self.alphabet_size - 1


DEFAULT_RULES = Rules()
