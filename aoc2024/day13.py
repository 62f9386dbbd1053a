"""Day 13: win prizes from claw machines with the fewest tokens."""

import re

_BUTTON_X = re.compile(r"X\+(\d+)")
_BUTTON_Y = re.compile(r"Y\+(\d+)")
_ANY_X = re.compile(r"(?:X\+|X=)(\d+)")
_ANY_Y = re.compile(r"(?:Y\+|Y=)(\d+)")
_PRIZE_X = re.compile(r"X=(\d+)")
_PRIZE_Y = re.compile(r"Y=(\d+)")

PRIZE_OFFSET = 10_000_000_000_000


def _trunc_div(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _first(pattern, line):
    match = pattern.search(line)
    if match is None:
        raise ValueError(f"malformed claw machine line: {line!r}")
    return int(match[1])


def _machines(pairs):
    if len(pairs) % 3:
        raise ValueError("claw machine description is incomplete")
    return [pairs[index:index + 3] for index in range(0, len(pairs), 3)]


def _tokens(machines):
    total = 0
    for (ax, ay), (bx, by), (px, py) in machines:
        b = _trunc_div(px * ay - py * ax, bx * ay - by * ax)
        a = _trunc_div(px - bx * b, ax)
        if a * ax + b * bx == px and a * ay + b * by == py:
            total += 3 * a + b
    return total


def _non_blank(puzzle_input):
    return [line for line in puzzle_input.splitlines() if line.strip()]


def part_one(puzzle_input):
    """Fewest tokens to win every winnable prize."""
    pairs = [(_first(_ANY_X, line), _first(_ANY_Y, line)) for line in _non_blank(puzzle_input)]
    return _tokens(_machines(pairs))


def part_two(puzzle_input):
    """Fewest tokens with every prize moved out by 10,000,000,000,000."""
    pairs = []
    for line in _non_blank(puzzle_input):
        if _BUTTON_X.search(line):
            pairs.append((_first(_BUTTON_X, line), _first(_BUTTON_Y, line)))
        else:
            pairs.append(
                (
                    _first(_PRIZE_X, line) + PRIZE_OFFSET,
                    _first(_PRIZE_Y, line) + PRIZE_OFFSET,
                )
            )
    return _tokens(_machines(pairs))