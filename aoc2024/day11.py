"""Day 11: count stones that split as you blink."""

PART_ONE_BLINKS = 25
PART_TWO_BLINKS = 75


def count_stones(number, blink, total_blinks, cache):
    """Number of stones one stone becomes after blinking through ``total_blinks``.

    ``blink`` is the index of the current blink, counted from 1. ``cache``
    is a dict keyed by ``(number, blink)`` and is filled in as results are
    found.
    """
    cached = cache.get((number, blink))
    if cached is not None:
        return cached

    result = 0
    while blink <= total_blinks:
        digits = len(str(number))
        if blink == total_blinks:
            result += 2 if digits % 2 == 0 else 1
            break
        if number == 0:
            number = 1
        elif digits % 2 == 0:
            divisor = 10 ** (digits // 2)
            result += count_stones(number // divisor, blink + 1, total_blinks, cache)
            result += count_stones(number % divisor, blink + 1, total_blinks, cache)
            break
        else:
            number *= 2024
        blink += 1

    cache[(number, blink)] = result
    return result


def _total_stones(puzzle_input, total_blinks):
    lines = puzzle_input.splitlines()
    if not lines:
        raise ValueError("puzzle input is empty")
    cache = {}
    return sum(
        count_stones(int(token), 1, total_blinks, cache) for token in lines[0].split()
    )


def part_one(puzzle_input):
    """Stones after 25 blinks."""
    return _total_stones(puzzle_input, PART_ONE_BLINKS)


def part_two(puzzle_input):
    """Stones after 75 blinks."""
    return _total_stones(puzzle_input, PART_TWO_BLINKS)