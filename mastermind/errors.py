"""
Errors raised by the game core.

- InvalidCodeError: digits supplied from outside (a player's guess) are the wrong
  count or out of range. The input loop catches it and asks again.
- RoundAlreadyCompleteError: a guess was submitted to a finished round. That is a
  bug in the caller, so nothing catches it.
"""


class InvalidCodeError(ValueError):
    pass


class RoundAlreadyCompleteError(RuntimeError):
    def __init__(self, guess_count: int) -> None:
        super().__init__(
            f"Round is already complete after {guess_count} guess(es). No more guesses allowed."
        )
        self.guess_count = guess_count
