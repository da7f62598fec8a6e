"""
Terminal output helpers.
Turns digits, codes and clues into strings with ANSI colors. Nothing here
knows about rounds or input; the driver decides what to print and when.
"""

from .rules import DEFAULT_RULES, Rules
from .schemas import Clue, Code

RESET = "\u001b[0m"
BOLD = "\u001b[1m"
ORANGE_TEXT = "\u001b[31m"
BIG_DOT = "⬤"

# Background color for each digit 0 -> 5
DIGIT_PALETTE = {
    0: "\u001b[47m",    # white
    1: "\u001b[42m",    # green
    2: "\u001b[41m",    # red
    3: "\u001b[45;1m",  # pink
    4: "\u001b[46m",    # blue
    5: "\u001b[43m",    # orange
}


def render_digit(value: int, color: bool = True) -> str:
    if value not in DIGIT_PALETTE:
        raise ValueError(f"No color for digit {value!r}.")
    if not color:
        return f" {value} "
    return f" {BOLD}{DIGIT_PALETTE[value]} {value} {RESET} "


def render_code(code: Code, color: bool = True) -> str:
    return "".join(render_digit(d, color) for d in code.digits)


def render_marker(symbol: str, color: bool = True, rules: Rules = DEFAULT_RULES) -> str:
    """
    One clue marker. Plain mode prints the symbol itself ("x" or "o").
    """
    if symbol not in (rules.exact_symbol, rules.color_symbol):
        raise ValueError(f"Unknown clue symbol {symbol!r}.")
    if not color:
        return f" {symbol} "
    if symbol == rules.exact_symbol:
        return f"{BOLD}{ORANGE_TEXT} {BIG_DOT} {RESET}"
    return f"{BOLD} {BIG_DOT} {RESET}"


def render_clue(clue: Clue, color: bool = True, rules: Rules = DEFAULT_RULES) -> str:
    """
    Exact markers first, then color markers. Marker order says nothing about
    which positions matched.
    """
    symbols = [rules.exact_symbol] * clue.exact_matches + [rules.color_symbol] * clue.color_matches
    return "".join(render_marker(s, color, rules) for s in symbols)
