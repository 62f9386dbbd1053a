"""Day 10: score and rate hiking trails on a topographic map."""

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_SUMMIT = 9


def _parse(puzzle_input):
    return [[ord(char) - ord("0") for char in line] for line in puzzle_input.splitlines()]


def _trailheads(grid):
    return [
        (row, column)
        for row, heights in enumerate(grid)
        for column, height in enumerate(heights)
        if height == 0
    ]


def _uphill(grid, position):
    rows, cols = len(grid), len(grid[0])
    row, column = position
    height = grid[row][column]
    for d_row, d_col in _STEPS:
        next_row, next_col = row + d_row, column + d_col
        if 0 <= next_row < rows and 0 <= next_col < cols:
            if grid[next_row][next_col] == height + 1:
                yield next_row, next_col


def trail_summits(grid, position):
    """Summits reached by each trail from ``position``, one entry per trail."""
    row, column = position
    if grid[row][column] == _SUMMIT:
        return [position]
    return [summit for step in _uphill(grid, position) for summit in trail_summits(grid, step)]


def count_paths(grid, position):
    """Number of distinct trails from ``position`` to any summit."""
    row, column = position
    if grid[row][column] == _SUMMIT:
        return 1
    return sum(count_paths(grid, step) for step in _uphill(grid, position))


def part_one(puzzle_input):
    """Sum of trailhead scores: distinct summits reachable from each."""
    grid = _parse(puzzle_input)
    return sum(len(set(trail_summits(grid, head))) for head in _trailheads(grid))


def part_two(puzzle_input):
    """Sum of trailhead ratings: distinct trails from each."""
    grid = _parse(puzzle_input)
    return sum(count_paths(grid, head) for head in _trailheads(grid))