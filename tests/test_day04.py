import pytest

from aoc2024.day04 import part_one, part_two

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 18


def test_part_two_example():
    assert part_two(EXAMPLE) == 9


def test_part_one_both_directions_on_one_line():
    assert part_one("XMASAMX\n") == 2


def test_part_two_single_cross():
    assert part_two("M.S\n.A.\nM.S\n") == 1
    assert part_two("M.M\n.A.\nM.S\n") == 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")
    with pytest.raises(ValueError):
        part_two("")