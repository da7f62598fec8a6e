"""
Pure game logic (no terminal, no state).
We compute two feedback numbers for each guess:
- exact_matches: how many positions are exactly correct (right digit, right place)
- color_matches: how many more digits appear in the answer but sit in the wrong place

Repeats are allowed in both codes, so a digit only counts as often as it appears
in whichever code has fewer of it.
"""

from .rules import DEFAULT_RULES, Rules
from .schemas import Clue, Code


def evaluate(guess: Code, answer: Code, rules: Rules = DEFAULT_RULES) -> Clue:
    """
    Example:
      guess  = [1, 1, 2, 2]
      answer = [1, 2, 2, 2]
      exact_matches = 3  (positions 0, 2 and 3)
      total_shared  = 3  (one 1, two 2s)
      color_matches = 0
    """

    # 1. Count exact position matches
    exact_matches = 0
    for i in range(rules.code_length):
        if guess[i] == answer[i]:
            exact_matches += 1

    # 2. Count how many digits the two codes share, duplicates included
    guess_counts = [0] * rules.alphabet_size
    answer_counts = [0] * rules.alphabet_size
    for digit in guess.digits:
        guess_counts[digit] += 1
    for digit in answer.digits:
        answer_counts[digit] += 1

    # Overlap is the sum of the smaller count for each digit
    total_shared = 0
    for digit in range(rules.alphabet_size):
        total_shared += min(guess_counts[digit], answer_counts[digit])

    # 3. Exact matches are part of the overlap, so never negative
    return Clue(exact_matches=exact_matches, color_matches=total_shared - exact_matches)
