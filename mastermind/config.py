"""
Single place to:
- Read settings from env (or a local .env)
- Turn them into a Settings object the terminal driver can use

Only the driver reads these. The game core takes no environment input.

MASTERMIND_COLOR      -> "0", "false", "no" or "off" turns ANSI colors off
NO_COLOR              -> set to anything to turn ANSI colors off
MASTERMIND_LOG_LEVEL  -> DEBUG, INFO, WARNING (default), ERROR
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    color: bool = True
    log_level: int = logging.WARNING


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"MASTERMIND_LOG_LEVEL={raw!r} is not a logging level.")
    return level


def get_settings() -> Settings:
    # dev convenience; a shell export wins over the .env file
    load_dotenv()

    color = os.getenv("MASTERMIND_COLOR", "1").strip().lower() not in FALSY
    if os.getenv("NO_COLOR") is not None:
        color = False

    log_level = _parse_log_level(os.getenv("MASTERMIND_LOG_LEVEL", "WARNING"))
    return Settings(color=color, log_level=log_level)
