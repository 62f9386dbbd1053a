"""Day 2: check reactor reports for safety."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_reports(puzzle_input):
    for line in puzzle_input.splitlines():
        yield [int(token) for token in line.split() if _INTEGER.fullmatch(token)]


def is_report_safe(levels):
    """A report is safe if it strictly rises or falls by steps of at most 3."""
    differences = [after - before for before, after in zip(levels, levels[1:])]
    monotonic = all(d > 0 for d in differences) or all(d < 0 for d in differences)
    return monotonic and all(abs(d) < 4 for d in differences)


def _is_safe_with_dampener(levels):
    if is_report_safe(levels):
        return True
    return any(
        is_report_safe(levels[:index] + levels[index + 1:])
        for index in range(len(levels))
    )


def part_one(puzzle_input):
    """Number of safe reports."""
    return sum(1 for levels in _parse_reports(puzzle_input) if is_report_safe(levels))


def part_two(puzzle_input):
    """Number of reports that are safe after removing at most one level."""
    return sum(
        1 for levels in _parse_reports(puzzle_input) if _is_safe_with_dampener(levels)
    )