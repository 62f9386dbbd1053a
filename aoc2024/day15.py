"""Day 15: a warehouse robot pushing boxes around."""

_DIRECTIONS = {"<": (0, -1), ">": (0, 1), "^": (-1, 0), "v": (1, 0)}
_WIDENED = {"#": "##", ".": "..", "O": "[]", "@": "@."}


def _parse(puzzle_input, widen):
    """Split the input into map rows and the concatenated move string."""
    rows = []
    moves = []
    in_moves = False
    for line in puzzle_input.splitlines():
        if not line.strip():
            in_moves = True
            continue
        if in_moves:
            moves.append(line)
        elif widen:
            rows.append("".join(_WIDENED.get(char, "") for char in line))
        else:
            rows.append(line)
    return rows, "".join(moves)


def _locate(rows, box_char):
    walls = set()
    boxes = set()
    robot = None
    for row, line in enumerate(rows):
        for column, char in enumerate(line):
            if char == "#":
                walls.add((row, column))
            elif char == box_char:
                boxes.add((row, column))
        if "@" in line:
            robot = (row, line.index("@"))
    if robot is None:
        raise ValueError("warehouse map has no robot '@'")
    return walls, boxes, robot


def _simulate(walls, boxes, robot, moves, width):
    """Run the moves and return the final set of box positions.

    Boxes are keyed by their leftmost cell and span ``width`` columns.
    """

    def box_at(cell):
        row, column = cell
        for offset in range(width):
            if (row, column - offset) in boxes:
                return (row, column - offset)
        return None

    def pushed_group(first, d_row, d_col):
        group = {first}
        frontier = [first]
        while frontier:
            row, column = frontier.pop()
            for offset in range(width):
                cell = (row + d_row, column + offset + d_col)
                if cell in walls:
                    return None
                other = box_at(cell)
                if other is not None and other not in group:
                    group.add(other)
                    frontier.append(other)
        return group

    for move in moves:
        direction = _DIRECTIONS.get(move)
        if direction is None:
            continue
        d_row, d_col = direction
        target = (robot[0] + d_row, robot[1] + d_col)
        if target in walls:
            continue
        first = box_at(target)
        if first is not None:
            group = pushed_group(first, d_row, d_col)
            if group is None:
                continue
            boxes -= group
            boxes |= {(row + d_row, column + d_col) for row, column in group}
        robot = target
    return boxes


def _gps_sum(boxes):
    return sum(100 * row + column for row, column in boxes)


def part_one(puzzle_input):
    """Sum of box GPS coordinates after the robot has finished moving."""
    rows, moves = _parse(puzzle_input, widen=False)
    walls, boxes, robot = _locate(rows, "O")
    return _gps_sum(_simulate(walls, boxes, robot, moves, width=1))


def part_two(puzzle_input):
    """Sum of box GPS coordinates in the twice-as-wide warehouse."""
    rows, moves = _parse(puzzle_input, widen=True)
    walls, boxes, robot = _locate(rows, "[")
    return _gps_sum(_simulate(walls, boxes, robot, moves, width=2))