"""Day 9: compact an amphipod's disk and compute its checksum."""

FREE = -1


def _disk_map(puzzle_input):
    lines = puzzle_input.splitlines()
    if not lines:
        raise ValueError("puzzle input is empty")
    return [int(char) for char in lines[0]]


def part_one(puzzle_input):
    """Checksum after moving file blocks one at a time into free space."""
    layout = []
    for index, length in enumerate(_disk_map(puzzle_input)):
        block = index // 2 if index % 2 == 0 else FREE
        layout.extend([block] * length)

    checksum = 0
    position = 0
    while position < len(layout):
        if layout[position] == FREE:
            checksum += layout.pop() * position
            while layout[-1] == FREE:
                layout.pop()
        else:
            checksum += layout[position] * position
        position += 1
    return checksum


def find_last_file_that_fits(layout, space):
    """Last unmoved file no longer than ``space``, with its index.

    Entries are ``(file_id, length)``; free space has id -1 and moved files
    have id 0. If nothing fits, the first entry and index 0 are returned.
    """
    for index in range(len(layout) - 1, -1, -1):
        file_id, length = layout[index]
        if file_id not in (FREE, 0) and length <= space:
            return (file_id, length), index
    return tuple(layout[0]), 0


def part_two(puzzle_input):
    """Checksum after moving whole files into the leftmost free span."""
    layout = [
        [index // 2 if index % 2 == 0 else FREE, length]
        for index, length in enumerate(_disk_map(puzzle_input))
    ]

    checksum = 0
    position = 0
    index = 0
    while index < len(layout):
        file_id, length = layout[index]
        if file_id == FREE:
            (moved_id, moved_length), moved_index = find_last_file_that_fits(layout, length)
            if moved_index > index:
                layout[index][1] -= moved_length
                layout[moved_index][0] = 0
                checksum += sum(moved_id * p for p in range(position, position + moved_length))
                position += moved_length
                # Look at the same free span again: another file may fit.
                continue
            position += max(length, 0)
        else:
            checksum += sum(file_id * p for p in range(position, position + length))
            position += max(length, 0)
        index += 1
    return checksum