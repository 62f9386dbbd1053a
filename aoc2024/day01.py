"""Day 1: compare two location-id lists."""

import re
from collections import Counter

_INTEGER = re.compile(r"[+-]?[0-9]+")


def read_input(puzzle_input):
    """Split the input into the left and right columns of numbers.

    Tokens that are not integers are ignored; lines that do not hold
    exactly two numbers are skipped.
    """
    left, right = [], []
    for line in puzzle_input.splitlines():
        numbers = [int(token) for token in line.split() if _INTEGER.fullmatch(token)]
        if len(numbers) == 2:
            left.append(numbers[0])
            right.append(numbers[1])
    return left, right


def part_one(puzzle_input):
    """Total distance between the sorted left and right lists."""
    left, right = read_input(puzzle_input)
    return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))


def part_two(puzzle_input):
    """Similarity score: each left number times its count on the right."""
    left, right = read_input(puzzle_input)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)