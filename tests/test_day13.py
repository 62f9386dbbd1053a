import pytest

from aoc2024.day13 import part_one, part_two

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""

FIRST_MACHINE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400
"""

SECOND_MACHINE = """\
Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 480


def test_part_two_example():
    assert part_two(EXAMPLE) == 875318608908


def test_part_one_single_winnable_machine():
    assert part_one(FIRST_MACHINE) == 280


def test_part_one_unwinnable_machine():
    assert part_one(SECOND_MACHINE) == 0


def test_part_two_first_machine_unwinnable():
    assert part_two(FIRST_MACHINE) == 0


def test_empty_input():
    assert part_one("") == 0
    assert part_two("") == 0


def test_incomplete_machine_raises():
    with pytest.raises(ValueError):
        part_one("Button A: X+94, Y+34\nButton B: X+22, Y+67\n")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part_one("Button A: nothing here\nButton B: X+1, Y+2\nPrize: X=3, Y=4\n")