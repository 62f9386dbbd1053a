"""Day 7: calibrate bridge equations with missing operators."""

import operator
import re

_NUMBER = re.compile(r"\+?[0-9]+")


def concat(left, right):
    """Join the decimal digits of two numbers."""
    return int(f"{left}{right}")


def _solvable(numbers, operators):
    target = numbers[0]

    def search(index, partial):
        if partial > target:
            return False
        if index == len(numbers):
            return partial == target
        return any(search(index + 1, op(partial, numbers[index])) for op in operators)

    return search(2, numbers[1])


def equation_is_true(numbers):
    """Whether ``numbers[0]`` can be made from the rest with + and *."""
    return _solvable(numbers, (operator.add, operator.mul))


def equation_is_true_with_concatenation(numbers):
    """Whether ``numbers[0]`` can be made from the rest with +, * and ||."""
    return _solvable(numbers, (operator.add, operator.mul, concat))


def _equations(puzzle_input):
    for line in puzzle_input.splitlines():
        numbers = [
            int(token) for token in line.replace(":", "").split() if _NUMBER.fullmatch(token)
        ]
        if len(numbers) < 2:
            raise ValueError(f"malformed equation: {line!r}")
        yield numbers


def part_one(puzzle_input):
    """Sum of the targets reachable with + and *."""
    return sum(numbers[0] for numbers in _equations(puzzle_input) if equation_is_true(numbers))


def part_two(puzzle_input):
    """Sum of the targets reachable with +, * and concatenation."""
    return sum(
        numbers[0]
        for numbers in _equations(puzzle_input)
        if equation_is_true_with_concatenation(numbers)
    )