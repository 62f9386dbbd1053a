"""Day 6: follow the patrolling guard."""

# Headings in turning order: up, right, down, left.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_NEVER = 100_000_000


def _parse(puzzle_input):
    grid = puzzle_input.splitlines()
    if not grid:
        raise ValueError("puzzle input is empty")
    for row, line in enumerate(grid):
        column = line.find("^")
        if column != -1:
            return grid, (row, column)
    raise ValueError("puzzle input has no guard '^'")


def _is_inside(position, rows, cols):
    row, column = position
    return 0 < row < rows - 1 and 0 < column < cols - 1


def part_one(puzzle_input):
    """Number of distinct positions the guard visits before leaving."""
    grid, start = _parse(puzzle_input)
    rows, cols = len(grid), len(grid[0])
    position = start
    heading = 0
    visited = {start}
    while _is_inside(position, rows, cols):
        dr, dc = _HEADINGS[heading]
        ahead = (position[0] + dr, position[1] + dc)
        if grid[ahead[0]][ahead[1]] == "#":
            heading = (heading + 1) % 4
        else:
            position = ahead
            visited.add(position)
    return len(visited)


def _gets_stuck(grid, start, obstruction, rows, cols):
    position = start
    heading = 0
    hits = 0
    first_hit = {}
    repeated = 0
    last_gap = _NEVER
    while _is_inside(position, rows, cols):
        dr, dc = _HEADINGS[heading]
        ahead = (position[0] + dr, position[1] + dc)
        if ahead == obstruction or grid[ahead[0]][ahead[1]] == "#":
            heading = (heading + 1) % 4
            if ahead in first_hit:
                last_gap = hits - first_hit[ahead]
                repeated += 1
            else:
                repeated = 0
                first_hit[ahead] = hits
            hits += 1
        else:
            position = ahead
        if repeated >= last_gap:
            return True
    return False


def part_two(puzzle_input):
    """Number of single obstructions that trap the guard in a loop."""
    grid, start = _parse(puzzle_input)
    rows, cols = len(grid), len(grid[0])
    return sum(
        1
        for row, line in enumerate(grid)
        for column, char in enumerate(line)
        if char not in "#^" and _gets_stuck(grid, start, (row, column), rows, cols)
    )