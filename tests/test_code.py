"""
Testing Code and Clue construction
- from_digits accepts 4 ints in 0..5 and nothing else
- generate_random uses the random source and always yields a valid code
"""

import pytest
from pydantic import ValidationError

import mastermind.random_client as random_client
from mastermind.errors import InvalidCodeError
from mastermind.schemas import Clue, Code, GuessEntry


@pytest.mark.parametrize("digit", [0, 5])
def test_from_digits_accepts_boundary_values(digit):
    code = Code.from_digits([digit, digit, digit, digit])
    assert code.digits == (digit, digit, digit, digit)


@pytest.mark.parametrize("digit", [-1, 6])
def test_from_digits_rejects_out_of_range(digit):
    with pytest.raises(InvalidCodeError) as excinfo:
        Code.from_digits([0, 1, digit, 2])
    assert str(digit) in str(excinfo.value)


@pytest.mark.parametrize("digits", [[], [1, 2, 3], [1, 2, 3, 4, 5]])
def test_from_digits_rejects_wrong_length(digits):
    with pytest.raises(InvalidCodeError):
        Code.from_digits(digits)


@pytest.mark.parametrize("digits", [["1", "2", "3", "4"], [1.0, 2, 3, 4], [True, 0, 0, 0], None])
def test_from_digits_rejects_non_integers(digits):
    with pytest.raises(InvalidCodeError):
        Code.from_digits(digits)


def test_invalid_code_error_is_a_value_error():
    with pytest.raises(ValueError):
        Code.from_digits([9, 9, 9, 9])


def test_code_keeps_order_and_is_read_only():
    code = Code.from_digits((5, 0, 0, 3))

    assert code.digits == (5, 0, 0, 3)
    assert len(code) == 4
    assert code[0] == 5 and code[3] == 3
    assert str(code) == "5003"
    with pytest.raises(ValidationError):
        code.digits = (1, 1, 1, 1)


def test_code_iterates_over_its_digits():
    code = Code.from_digits([1, 2, 3, 4])

    assert list(code) == [1, 2, 3, 4]
    assert 3 in code
    assert 5 not in code
    # a Code is itself a valid digit sequence
    assert Code.from_digits(code) == code


def test_codes_compare_by_digits():
    assert Code.from_digits([1, 2, 3, 4]) == Code.from_digits((1, 2, 3, 4))
    assert Code.from_digits([1, 2, 3, 4]) != Code.from_digits([4, 3, 2, 1])


def test_generate_random_uses_module_source(monkeypatch):
    calls = []

    def fake_fetch_code(length, alphabet_size):
        calls.append((length, alphabet_size))
        return [5, 4, 0, 0]

    # Patch the module attribute that Code.generate_random looks up
    monkeypatch.setattr(random_client, "fetch_code", fake_fetch_code)

    code = Code.generate_random()
    assert code.digits == (5, 4, 0, 0)
    assert calls == [(4, 6)]


def test_generate_random_accepts_explicit_source():
    code = Code.generate_random(lambda length, size: [size - 1] * length)
    assert code.digits == (5, 5, 5, 5)


def test_generate_random_always_valid():
    for _ in range(200):
        code = Code.generate_random()
        assert len(code) == 4
        assert all(0 <= d <= 5 for d in code.digits)


def test_fetch_code_covers_whole_alphabet():
    seen = set()
    for _ in range(300):
        seen.update(random_client.fetch_code())
    assert seen == {0, 1, 2, 3, 4, 5}


def test_fetch_code_rejects_bad_arguments():
    with pytest.raises(ValueError):
        random_client.fetch_code(0, 6)


def test_clue_rejects_negative_and_oversized_totals():
    with pytest.raises(ValidationError):
        Clue(exact_matches=-1, color_matches=0)
    with pytest.raises(ValidationError):
        Clue(exact_matches=3, color_matches=2)


def test_guess_entry_holds_turn_guess_and_clue():
    entry = GuessEntry(turn=1, guess=Code.from_digits([0, 0, 4, 4]), clue=Clue(exact_matches=1, color_matches=1))
    assert entry.turn == 1
    assert str(entry.guess) == "0044"
    assert entry.clue.as_tuple() == (1, 1)
