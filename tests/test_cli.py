import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, lines):
    stacks = Stacks.from_values(values)
    for move in lines:
        getattr(stacks, move)()
    return stacks


def test_no_arguments_fails_silently(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["1 2 2"], ["-2147483649", "3"]],
)
def test_invalid_input_prints_error(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == "Error\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


def test_single_argument_is_split(capsys):
    assert main(["3 2 1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay([3, 2, 1], lines).values_a() == [1, 2, 3]


def test_many_arguments(capsys):
    values = [8, -3, 42, 0, 17, -99, 5, 23]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    stacks = _replay(values, lines)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []