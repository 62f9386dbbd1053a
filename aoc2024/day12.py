"""Day 12: price the fences around garden regions."""

from collections import defaultdict
from itertools import groupby

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _regions(puzzle_input):
    """Yield each connected region of equal plants as a set of (row, column)."""
    cells_by_plant = defaultdict(set)
    for row, line in enumerate(puzzle_input.splitlines()):
        for column, plant in enumerate(line):
            cells_by_plant[plant].add((row, column))

    for cells in cells_by_plant.values():
        remaining = set(cells)
        while remaining:
            start = remaining.pop()
            region = {start}
            frontier = [start]
            while frontier:
                row, column = frontier.pop()
                for d_row, d_col in _STEPS:
                    neighbour = (row + d_row, column + d_col)
                    if neighbour in remaining:
                        remaining.remove(neighbour)
                        region.add(neighbour)
                        frontier.append(neighbour)
            yield region


def _perimeter(region):
    return sum(
        1
        for row, column in region
        for d_row, d_col in _STEPS
        if (row + d_row, column + d_col) not in region
    )


def _runs(values):
    """Split integers into maximal runs of consecutive values."""
    ordered = sorted(values)
    for _, group in groupby(enumerate(ordered), key=lambda pair: pair[1] - pair[0]):
        yield [value for _, value in group]


def _sides(region):
    horizontal = defaultdict(set)
    vertical = defaultdict(set)
    for row, column in region:
        if (row - 1, column) not in region:
            horizontal[row].add(column)
        if (row, column - 1) not in region:
            vertical[column].add(row)
        if (row + 1, column) not in region:
            horizontal[row + 1].add(column)
        if (row, column + 1) not in region:
            vertical[column + 1].add(row)

    sides = 0
    for boundary, columns in horizontal.items():
        for run in _runs(columns):
            sides += 2
            # Two fences crossing at a corner count as extra sides.
            sides += 2 * sum(
                1 for column in run if {boundary - 1, boundary} <= vertical.get(column, set())
            )
    return sides


def part_one(puzzle_input):
    """Total price: area times perimeter for every region."""
    return sum(len(region) * _perimeter(region) for region in _regions(puzzle_input))


def part_two(puzzle_input):
    """Bulk-discount price: area times number of sides for every region."""
    return sum(len(region) * _sides(region) for region in _regions(puzzle_input))