"""
- Keep the player's environment (.env, NO_COLOR, ...) out of the tests
- Provide fixed answers so rounds are predictable
- Provide scripted input/output so the driver can run without a terminal
"""
import pytest
from typing import Iterable, List

from mastermind.schemas import Code
from mastermind.round import Round


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MASTERMIND_COLOR", "MASTERMIND_LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() must not pick up a developer's .env
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def answer() -> Code:
    return Code.from_digits([0, 1, 2, 3])


@pytest.fixture
def fixed_round(answer) -> Round:
    return Round(answer=answer)


class ScriptedTerminal:
    """
    Feeds lines to `read` one at a time and collects everything passed to `write`.
    Running out of lines behaves like Ctrl-D (EOFError), same as input().
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: List[str] = []

    def read(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def terminal():
    def make(lines):
        return ScriptedTerminal(lines)
    return make
