"""Day 3: evaluate multiplication instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def part_one(puzzle_input):
    """Sum of all mul(a,b) products."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(puzzle_input))


def part_two(puzzle_input):
    """Sum of mul products, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(puzzle_input):
        if match[1] is not None:
            if enabled:
                total += int(match[1]) * int(match[2])
        elif match[0] == "don't()":
            enabled = False
        else:
            enabled = True
    return total