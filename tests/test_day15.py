import pytest

from aoc2024.day15 import part_one, part_two

SMALL_EXAMPLE = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

LARGE_EXAMPLE = """\
##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^
"""

WIDE_EXAMPLE = """\
#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""


def test_part_one_small_example():
    assert part_one(SMALL_EXAMPLE) == 2028


def test_part_one_large_example():
    assert part_one(LARGE_EXAMPLE) == 10092


def test_part_two_wide_example():
    assert part_two(WIDE_EXAMPLE) == 618


def test_part_two_large_example():
    assert part_two(LARGE_EXAMPLE) == 9021


def test_part_one_box_stops_at_wall():
    warehouse = "#####\n#@O.#\n#####\n\n>>>"
    assert part_one(warehouse) == 103


def test_part_one_without_moves_keeps_boxes():
    warehouse = "#####\n#@O.#\n#####\n"
    assert part_one(warehouse) == 102


def test_part_two_pushes_wide_box_right():
    warehouse = "#####\n#@.O#\n#####\n\n>>"
    # Widened row: ##@...[]## -> robot at 2, box at 6.
    assert part_two(warehouse) == 106


def test_part_two_box_pushed_until_wall():
    warehouse = "#####\n#@O.#\n#####\n\n>>>>"
    # Widened row: ##@.[]..## -> box can move from column 4 to 6.
    assert part_two(warehouse) == 106


def test_missing_robot_raises():
    with pytest.raises(ValueError):
        part_one("#####\n#.O.#\n#####\n\n>")