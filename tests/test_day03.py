from aoc2024.day03 import part_one, part_two

EXAMPLE_ONE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))\n"
EXAMPLE_TWO = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def test_part_one_example():
    assert part_one(EXAMPLE_ONE) == 161


def test_part_two_example():
    assert part_two(EXAMPLE_TWO) == 48


def test_switch_carries_across_lines():
    text = "mul(2,3)don't()\nmul(4,5)\ndo()mul(1,1)\n"
    assert part_two(text) == 7
    assert part_one(text) == 27


def test_malformed_instructions_ignored():
    assert part_one("mul(1, 2) mul(3,4 mul[5,6]") == 0