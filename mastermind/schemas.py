"""
Explicit validation & Pydantic models
- Code: the 4 digit sequence used for both the answer and each guess.
- Clue: feedback for one guess (exact matches, color matches).
- GuessEntry: one turn of a round's history.

All three are frozen: once built they never change.
"""

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator, model_validator

from . import random_client
from .errors import InvalidCodeError
from .rules import DEFAULT_RULES
from .types import Digits, DigitSource


# 1. A code: answer or guess, same type either way
class Code(BaseModel):
    model_config = ConfigDict(frozen=True)

    digits: Tuple[StrictInt, ...] = Field(
        ..., description="Exactly 4 digits, each between 0 and 5. Order matters."
    )

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, digits: Digits) -> Digits:
        """
        Length first, then range. The message names the first problem found.
        """
        if len(digits) != DEFAULT_RULES.code_length:
            raise ValueError(
                f"Code must have exactly {DEFAULT_RULES.code_length} digits, got {len(digits)}."
            )
        for position, digit in enumerate(digits):
            if digit < 0 or digit > DEFAULT_RULES.max_digit:
                raise ValueError(
                    f"Digit {digit} at position {position} is outside 0..{DEFAULT_RULES.max_digit}."
                )
        return digits

    @classmethod
    def from_digits(cls, sequence) -> "Code":
        """
        Build a code from digits that were already parsed into ints.
        Raises InvalidCodeError on a wrong count or a value outside 0..5.
        Checking the raw text typed by the player happens before this.
        """
        try:
            digits = tuple(sequence)
        except TypeError:
            raise InvalidCodeError(f"Expected a sequence of digits, got {sequence!r}.") from None

        try:
            return cls(digits=digits)
        except ValidationError as exc:
            raise InvalidCodeError(_first_error(exc)) from exc

    @classmethod
    def generate_random(cls, source: Optional[DigitSource] = None) -> "Code":
        """
        Example:
          Code.generate_random()                 -> e.g. Code(digits=(3, 0, 5, 3))
          Code.generate_random(lambda n, k: [1] * n) -> Code(digits=(1, 1, 1, 1))
        """
        if source is None:
            source = random_client.fetch_code
        digits = source(DEFAULT_RULES.code_length, DEFAULT_RULES.alphabet_size)
        return cls(digits=tuple(digits))

    # Behave like the digit tuple, not like pydantic's (field, value) pairs
    def __iter__(self) -> Iterator[int]:
        return iter(self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __getitem__(self, index: int) -> int:
        return self.digits[index]

    def __contains__(self, digit: object) -> bool:
        return digit in self.digits

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


# 2. Feedback for a single guess
class Clue(BaseModel):
    model_config = ConfigDict(frozen=True)

    exact_matches: int = Field(..., ge=0, description="Right digit in the right position")
    color_matches: int = Field(..., ge=0, description="Right digit in the wrong position")

    @model_validator(mode="after")
    def check_total(self) -> "Clue":
        if self.exact_matches + self.color_matches > DEFAULT_RULES.code_length:
            raise ValueError(
                f"exact_matches + color_matches must be at most {DEFAULT_RULES.code_length}."
            )
        return self

    @property
    def is_win(self) -> bool:
        return self.exact_matches == DEFAULT_RULES.code_length

    def as_tuple(self) -> Tuple[int, int]:
        return (self.exact_matches, self.color_matches)


# 3. One turn of a round
class GuessEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    turn: int = Field(..., ge=1, description="1-based turn number")
    guess: Code = Field(..., description="The player's guess")
    clue: Clue = Field(..., description="Feedback for the guess")


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = errors[0].get("msg", str(exc))
    # pydantic prefixes messages raised from our validators
    return message.removeprefix("Value error, ")
