from aoc2024.day10 import count_paths, part_one, part_two, trail_summits

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

SMALL = """\
0123
1234
8765
9876
"""

RATING_THREE = """\
.....0.
..4321.
..5..2.
..6543.
..7..4.
..8765.
..9....
"""


def _grid(text):
    return [[ord(char) - ord("0") for char in line] for line in text.splitlines()]


def test_part_one_example():
    assert part_one(EXAMPLE) == 36


def test_part_two_example():
    assert part_two(EXAMPLE) == 81


def test_part_one_small():
    assert part_one(SMALL) == 1


def test_trail_summits_small():
    assert set(trail_summits(_grid(SMALL), (0, 0))) == {(3, 0)}


def test_summit_is_its_own_summit():
    grid = _grid(SMALL)
    assert trail_summits(grid, (3, 0)) == [(3, 0)]
    assert count_paths(grid, (3, 0)) == 1


def test_count_paths_rating_three():
    assert count_paths(_grid(RATING_THREE), (0, 5)) == 3
    assert part_two(RATING_THREE) == 3


def test_trails_match_summit_entries():
    grid = _grid(EXAMPLE)
    for row, heights in enumerate(grid):
        for column, height in enumerate(heights):
            if height == 0:
                assert len(trail_summits(grid, (row, column))) == count_paths(grid, (row, column))


def test_dead_end_has_no_paths():
    grid = _grid("01\n..")
    assert count_paths(grid, (0, 0)) == 0
    assert trail_summits(grid, (0, 0)) == []