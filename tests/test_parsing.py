import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    atoi,
    atol,
    is_numeric,
    parse_arguments,
    split_single,
    validate,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+42 est la reponse", 42),
        ("Pas un 54 nombre", 0),
        ("-125cc", -125),
        ("", 0),
        ("+-152", 0),
        ("  \t\n17", 17),
        ("\a12", 12),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atol_does_not_skip_bell_character():
    assert atol("\a12") == 0


def test_atol_reads_beyond_int_range():
    assert atol("  -2147483649") == -2147483649
    assert atol("99999999999") == 99999999999


@pytest.mark.parametrize("text", ["12", "+12", "-12", "-", "+", ""])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["1a", " 1", "--1", "1 2", "1.0", "\u0663"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_split_single_on_spaces_only():
    assert split_single("  3 1  2 ") == ["3", "1", "2"]
    assert split_single("1\t2") == ["1\t2"]
    assert split_single("   ") == []


def test_validate_returns_values():
    assert validate(["3", "-1", "+2"]) == [3, -1, 2]


def test_validate_accepts_int_limits():
    assert validate([str(INT_MIN), str(INT_MAX)]) == [INT_MIN, INT_MAX]


@pytest.mark.parametrize(
    "tokens",
    [["2147483648"], ["-2147483649"], ["1", "a"], ["1", "+1"], ["1", "01"], ["4", "4"]],
)
def test_validate_rejects(tokens):
    with pytest.raises(InputError):
        validate(tokens)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        validate(["x"])


def test_parse_arguments_single_string():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_parse_arguments_many():
    assert parse_arguments(["3", "2", "1"]) == [3, 2, 1]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []
    assert parse_arguments(["   "]) == []


def test_parse_arguments_does_not_split_several():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "3"])


def test_parse_arguments_duplicate_in_single_string():
    with pytest.raises(InputError):
        parse_arguments(["5 7 5"])


@given(st.lists(st.integers(INT_MIN, INT_MAX), unique=True, min_size=1))
def test_parse_round_trip(values):
    words = [str(value) for value in values]
    assert parse_arguments([" ".join(words)]) == values
    if len(words) > 1:
        assert parse_arguments(words) == values