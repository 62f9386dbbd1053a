"""Day 17: run the three-bit computer and find a self-printing register value."""

_SEARCH_WIDTH = 10


def _register(lines, name):
    prefix = f"Register {name}"
    for line in lines:
        if line.startswith(prefix):
            parts = line.split(":")
            if len(parts) < 2:
                break
            value = int(parts[1].strip())
            if value < 0:
                raise ValueError(f"register {name} must not be negative")
            return value
    raise ValueError(f"register {name} is missing")


def _program(lines):
    for line in lines:
        if line.startswith("Program"):
            tokens = line.split()
            if len(tokens) < 2:
                break
            return [int(token) for token in tokens[1].split(",")]
    raise ValueError("program is missing")


def _run(a, b, c, program):
    """Yield each value the program outputs."""
    pointer = 0
    while True:
        if pointer + 1 >= len(program):
            raise ValueError(f"instruction pointer {pointer} is out of range")
        opcode, literal = program[pointer], program[pointer + 1]
        combo = {4: a, 5: b, 6: c}.get(literal, literal)
        jumped = False
        if opcode == 0:
            a >>= combo
        elif opcode == 1:
            b ^= literal
        elif opcode == 2:
            b = combo % 8
        elif opcode == 3:
            if a != 0:
                pointer = literal
                jumped = True
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            yield combo % 8
        elif opcode == 6:
            b = a >> combo
        elif opcode == 7:
            c = a >> combo
        if not jumped:
            pointer += 2
            if pointer >= len(program):
                return


def part_one(puzzle_input):
    """Comma-separated output of the program."""
    lines = puzzle_input.splitlines()
    a, b, c = (_register(lines, name) for name in "ABC")
    return ",".join(str(value) for value in _run(a, b, c, _program(lines)))


def calculate_print_value(a):
    """Value printed in one pass of the puzzle program for register A = ``a``."""
    b = a % 8
    b = b + 1 if b % 2 == 0 else b - 1
    c = a // 2**b
    b ^= c
    b ^= 4
    return b % 8


def part_two(puzzle_input):
    """Register A value rebuilt three bits at a time from the program's end."""
    program = _program(puzzle_input.splitlines())
    a = 0
    for instruction in reversed(program):
        a *= 8
        for step in range(_SEARCH_WIDTH):
            if calculate_print_value(a + step) == instruction:
                a += step
                break
    return a