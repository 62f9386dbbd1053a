"""Day 8: locate antinodes created by resonant antennas."""

import string
from itertools import combinations

_FREQUENCIES = string.ascii_uppercase + string.ascii_lowercase + string.digits


def _positions_of(lines, letter):
    return [
        (row, column)
        for row, line in enumerate(lines)
        for column, char in enumerate(line)
        if char == letter
    ]


def find_antinodes(lines, letter):
    """Antinodes of antenna ``letter``: one on each side of every antenna pair.

    Returns a list of ``(row, column)`` positions, possibly with repeats.
    The grid size is taken from the number of lines and the first line.
    """
    if not lines:
        return []
    rows, cols = len(lines), len(lines[0])
    antinodes = []
    for (row_a, col_a), (row_b, col_b) in combinations(_positions_of(lines, letter), 2):
        d_row, d_col = row_b - row_a, col_b - col_a
        before = (row_a - d_row, col_a - d_col)
        if before[0] >= 0 and 0 <= before[1] < cols:
            antinodes.append(before)
        after = (row_b + d_row, col_b + d_col)
        if after[0] < rows and 0 <= after[1] < cols:
            antinodes.append(after)
    return antinodes


def find_antinodes_with_harmonics(lines, letter):
    """Antinodes of antenna ``letter`` at every multiple of each pair's offset.

    The antennas themselves are included. Returns a list of
    ``(row, column)`` positions, possibly with repeats.
    """
    if not lines:
        return []
    rows, cols = len(lines), len(lines[0])
    antinodes = []
    for (row_a, col_a), (row_b, col_b) in combinations(_positions_of(lines, letter), 2):
        d_row, d_col = row_b - row_a, col_b - col_a
        row, col = row_a, col_a
        while row >= 0 and 0 <= col < cols:
            antinodes.append((row, col))
            row, col = row - d_row, col - d_col
        row, col = row_b, col_b
        while 0 <= row < rows and 0 <= col < cols:
            antinodes.append((row, col))
            row, col = row + d_row, col + d_col
    return antinodes


def _count_unique(puzzle_input, finder):
    lines = puzzle_input.splitlines()
    return len({position for letter in _FREQUENCIES for position in finder(lines, letter)})


def part_one(puzzle_input):
    """Number of distinct antinode positions."""
    return _count_unique(puzzle_input, find_antinodes)


def part_two(puzzle_input):
    """Number of distinct antinode positions, counting resonant harmonics."""
    return _count_unique(puzzle_input, find_antinodes_with_harmonics)