"""
Labels for clarity.
"""

from typing import Callable, List, Literal, Tuple

Digit = int  # 0 -> 5
Digits = Tuple[Digit, ...]  # 4 digit code, answer or guess
RoundStatus = Literal["in_progress", "won", "lost"]

# (length, alphabet_size) -> list of digits
DigitSource = Callable[[int, int], List[Digit]]
