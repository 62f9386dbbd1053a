"""Day 14: track security robots on a wrapping grid."""

import re

ROWS = 103
COLUMNS = 101
PART_ONE_SECONDS = 100

_ROBOT = re.compile(r"p=(\d+),(\d+) v=(-*\d+),(-*\d+)")


def _robots(puzzle_input):
    robots = []
    for line in puzzle_input.splitlines():
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"malformed robot line: {line!r}")
        px, py, vx, vy = (int(value) for value in match.groups())
        robots.append(((px, py), (vx, vy)))
    return robots


def _safety_factor(robots, seconds):
    mid_x, mid_y = COLUMNS // 2, ROWS // 2
    quadrants = [0, 0, 0, 0]
    for (px, py), (vx, vy) in robots:
        x = (px + seconds * vx) % COLUMNS
        y = (py + seconds * vy) % ROWS
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x) + 2 * (y > mid_y)] += 1
    first, second, third, fourth = quadrants
    return first * second * third * fourth


def part_one(puzzle_input):
    """Safety factor after 100 seconds."""
    return _safety_factor(_robots(puzzle_input), PART_ONE_SECONDS)


def part_two(puzzle_input):
    """First second within one full cycle with the lowest safety factor."""
    robots = _robots(puzzle_input)
    return min(range(ROWS * COLUMNS), key=lambda seconds: _safety_factor(robots, seconds))