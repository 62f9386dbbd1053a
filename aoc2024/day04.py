"""Day 4: word search for XMAS."""

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, -1), (-1, 1), (1, -1))


def _grid(puzzle_input):
    grid = puzzle_input.splitlines()
    if not grid:
        raise ValueError("puzzle input is empty")
    return grid


def part_one(puzzle_input):
    """Count XMAS in all eight directions."""
    grid = _grid(puzzle_input)
    rows, cols = len(grid), len(grid[0])
    count = 0
    for i, line in enumerate(grid):
        for j, char in enumerate(line):
            if char != "X":
                continue
            for di, dj in _DIRECTIONS:
                end_i, end_j = i + 3 * di, j + 3 * dj
                if not (0 <= end_i < rows and 0 <= end_j < cols):
                    continue
                if all(
                    grid[i + step * di][j + step * dj] == letter
                    for step, letter in enumerate("MAS", start=1)
                ):
                    count += 1
    return count


def part_two(puzzle_input):
    """Count MAS crosses shaped like an X."""
    grid = _grid(puzzle_input)
    rows = len(grid)
    diagonal_pairs = {("M", "S"), ("S", "M")}
    count = 0
    for i in range(1, rows - 1):
        for j, char in enumerate(grid[i]):
            if char != "A" or not 0 < j < rows - 1:
                continue
            falling = (grid[i - 1][j - 1], grid[i + 1][j + 1])
            rising = (grid[i - 1][j + 1], grid[i + 1][j - 1])
            if falling in diagonal_pairs and rising in diagonal_pairs:
                count += 1
    return count