"""Day 5: check and repair print-queue page orderings."""


def read_input(puzzle_input):
    """Parse ordering rules and updates.

    Returns a mapping from a page to the pages allowed after it, and the
    list of updates. A blank line separates the two sections.
    """
    rules = {}
    updates = []
    in_updates = False
    for line in puzzle_input.splitlines():
        if not line.strip():
            in_updates = True
            continue
        if not in_updates:
            before, after = (int(part) for part in line.split("|")[:2])
            rules.setdefault(before, set()).add(after)
        else:
            updates.append([int(part.strip()) for part in line.split(",")])
    return rules, updates


def _is_ordered(update, rules):
    return all(following in rules.get(page, ()) for page, following in zip(update, update[1:]))


def part_one(puzzle_input):
    """Sum of the middle pages of correctly ordered updates."""
    rules, updates = read_input(puzzle_input)
    return sum(update[len(update) // 2] for update in updates if _is_ordered(update, rules))


def part_two(puzzle_input):
    """Sum of the middle pages of incorrectly ordered updates after reordering."""
    rules, updates = read_input(puzzle_input)
    total = 0
    for update in updates:
        if _is_ordered(update, rules):
            continue
        ranking = sorted(
            update,
            key=lambda page: -sum(1 for other in update if other in rules.get(page, ())),
        )
        total += ranking[len(ranking) // 2]
    return total