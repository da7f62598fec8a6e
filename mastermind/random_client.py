"""
Random source for the answer.
Each digit is drawn on its own from the secure random generator, so every
position is uniform over 0..alphabet_size-1 and repeats are allowed.
"""

from secrets import randbelow
from typing import List

from .rules import DEFAULT_RULES


def fetch_code(
    length: int = DEFAULT_RULES.code_length,
    alphabet_size: int = DEFAULT_RULES.alphabet_size,
) -> List[int]:
    if length <= 0 or alphabet_size <= 0:
        raise ValueError("length and alphabet_size must be positive.")

    # randbelow(6) gives us a number between 0 and 5
    digits = []
    k = 0
    while k < length:
        digits.append(randbelow(alphabet_size))
        k += 1
    return digits
