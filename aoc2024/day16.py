"""Day 16: find the cheapest routes through the reindeer maze."""

import heapq
from dataclasses import dataclass, field, replace

_OFFSETS = {"r": (0, 1), "d": (1, 0), "l": (0, -1), "u": (-1, 0)}

# For each heading: the moves tried in order, as (new heading, cost).
_MOVES = {
    "r": (("r", 1), ("d", 1001), ("u", 1001)),
    "d": (("d", 1), ("r", 1001), ("l", 1001)),
    "l": (("l", 1), ("d", 1001), ("u", 1001)),
    "u": (("u", 1), ("r", 1001), ("l", 1001)),
}


@dataclass(frozen=True, order=True)
class Node:
    """A tile of the maze together with the heading the reindeer faces."""

    row: int
    column: int
    direction: str

    def successors(self, walls, number_of_rows):
        """Moves from this node as ``(node, cost)`` pairs.

        ``walls`` maps each row to the columns holding a wall. Stepping
        straight on costs 1; turning and stepping costs 1001. Nodes on the
        top row, the left column or from row ``number_of_rows`` down have
        no moves.
        """
        row, column = self.row, self.column
        moves = _MOVES.get(self.direction)
        if moves is None or not (0 < row < number_of_rows and column > 0):
            return []
        possible = []
        for heading, cost in moves:
            d_row, d_col = _OFFSETS[heading]
            next_row, next_col = row + d_row, column + d_col
            if next_col not in walls[next_row]:
                possible.append((Node(next_row, next_col, heading), cost))
        return possible


@dataclass(order=True)
class _Entry:
    cost: int
    node: Node = field(compare=False)


def _search(start, successors, stop):
    """Dijkstra search; returns the parent map and the node that stopped it."""
    parents = {start: (None, 0)}
    heap = [_Entry(0, start)]
    while heap:
        entry = heapq.heappop(heap)
        node = entry.node
        if stop(node):
            return parents, node
        if entry.cost > parents[node][1]:
            continue
        for successor, move_cost in successors(node):
            new_cost = entry.cost + move_cost
            known = parents.get(successor)
            if known is not None and known[1] <= new_cost:
                continue
            parents[successor] = (node, new_cost)
            heapq.heappush(heap, _Entry(new_cost, successor))
    return parents, None


def _build_path(target, parents):
    path = [target]
    while target in parents:
        target = parents[target][0]
        path.append(target)
    path.reverse()
    return path


def _parse(puzzle_input):
    lines = puzzle_input.splitlines()
    walls = {}
    start = end = None
    for row, line in enumerate(lines):
        walls[row] = {column for column, char in enumerate(line) if char == "#"}
        if "S" in line:
            start = (row, line.index("S"))
        if "E" in line:
            end = (row, line.index("E"))
    if start is None:
        raise ValueError("maze has no start 'S'")
    if end is None:
        raise ValueError("maze has no end 'E'")
    return walls, len(lines) - 1, start, end


def part_one(puzzle_input):
    """Lowest score from the start, facing east, to the end tile."""
    walls, number_of_rows, start, end = _parse(puzzle_input)
    _, reached = _search(
        Node(*start, "r"),
        lambda node: node.successors(walls, number_of_rows),
        lambda node: (node.row, node.column) == end,
    )
    if reached is None:
        raise ValueError("the end cannot be reached")
    parents, _ = _search(
        Node(*start, "r"),
        lambda node: node.successors(walls, number_of_rows),
        lambda node: node == reached,
    )
    return parents[reached][1]


def _heading_between(current, following):
    if current.row - following.row == 1:
        return "u"
    if following.column - current.column == 1:
        return "r"
    if following.row - current.row == 1:
        return "d"
    if current.column - following.column == 1:
        return "l"
    return None


def part_two(puzzle_input):
    """Number of tiles that lie on some best route through the maze."""
    walls, number_of_rows, start, end = _parse(puzzle_input)
    start_node = Node(*start, "r")
    parents, _ = _search(
        start_node,
        lambda node: node.successors(walls, number_of_rows),
        lambda node: False,
    )
    reachables = {node: value for node, value in parents.items() if node != start_node}

    path = _build_path(Node(*end, "u"), reachables)
    on_path = set(path)
    tiles = {(node.row, node.column) for node in path}

    index = 0
    while index < len(path):
        node = path[index]
        options = [
            reachables[variant]
            for variant in (replace(node, direction=heading) for heading in "rudl")
            if variant in reachables
        ]
        options.sort(key=lambda option: option[1])
        if len(options) > 2 and options[0][1] + 1000 == options[1][1]:
            heading = _heading_between(node, path[index + 1])
            if heading is None:
                costs = (0, 0)
            else:
                costs = tuple(
                    cost + (1 if parent.direction == heading else 1001)
                    for parent, cost in options[:2]
                )
            if costs[0] == costs[1]:
                for other in _build_path(options[1][0], reachables):
                    tiles.add((other.row, other.column))
                    if other not in on_path:
                        on_path.add(other)
                        path.append(other)
        index += 1

    return len(tiles)