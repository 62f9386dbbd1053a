import pytest

from aoc2024.day02 import is_report_safe, part_one, part_two

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 2


def test_part_two_example():
    assert part_two(EXAMPLE) == 4


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
    ],
)
def test_is_report_safe(levels, expected):
    assert is_report_safe(levels) is expected


def test_dampener_removes_first_level():
    assert part_one("9 1 2 3\n") == 0
    assert part_two("9 1 2 3\n") == 1