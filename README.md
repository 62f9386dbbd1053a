# aoc2024

Solutions to the puzzles of Advent of Code 2024, days 1 to 17.

Each day has its own module, from `aoc2024.day01` to `aoc2024.day17`.
Every module has two functions, `part_one(puzzle_input)` and
`part_two(puzzle_input)`. Both take the whole puzzle input as a string and
return the answer to that part.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from aoc2024 import day01

puzzle_input = Path("inputs/01.txt").read_text()
print(day01.part_one(puzzle_input))
print(day01.part_two(puzzle_input))
```

Most answers are integers. The first part of day 17 returns the program's
output as a comma-separated string.

Malformed input raises `ValueError` in the modules that check for it. Some
examples are an empty grid, a missing guard, robot, start or end tile, or a
missing register.

## Helpers

Some modules also expose the helpers they are built on:

- `day01.read_input(puzzle_input)` returns the left and right lists.
- `day02.is_report_safe(levels)` checks a single report.
- `day05.read_input(puzzle_input)` returns the ordering rules as a dict of
  sets, together with the updates.
- `day07.equation_is_true(numbers)`,
  `day07.equation_is_true_with_concatenation(numbers)` and
  `day07.concat(left, right)` work on a single equation.
- `day08.find_antinodes(lines, letter)` and
  `day08.find_antinodes_with_harmonics(lines, letter)` list the antinode
  positions for one antenna frequency.
- `day09.find_last_file_that_fits(layout, space)` picks the file to move
  into a free span.
- `day10.trail_summits(grid, position)` and `day10.count_paths(grid, position)`
  follow the trails that start at one position.
- `day11.count_stones(number, blink, total_blinks, cache)` counts the stones
  that one stone turns into.
- `day16.Node` is a maze tile together with a heading.
  `Node.successors(walls, number_of_rows)` lists the moves from that node
  and what each one costs.
- `day17.calculate_print_value(a)` returns the value the puzzle program
  prints for a given register A.

## Limits

This package contains no command-line program and does not read input
files. You load the puzzle input yourself and pass it in as a string.
Day 14 uses the fixed grid of the real puzzle, 101 by 103 tiles. The second
part of day 17 assumes the structure of the real puzzle program.

## Days

| Module | Puzzle |
|--------|--------|
| `day01` | Historian Hysteria |
| `day02` | Red-Nosed Reports |
| `day03` | Mull It Over |
| `day04` | Ceres Search |
| `day05` | Print Queue |
| `day06` | Guard Gallivant |
| `day07` | Bridge Repair |
| `day08` | Resonant Collinearity |
| `day09` | Disk Fragmenter |
| `day10` | Hoof It |
| `day11` | Plutonian Pebbles |
| `day12` | Garden Groups |
| `day13` | Claw Contraption |
| `day14` | Restroom Redoubt |
| `day15` | Warehouse Woes |
| `day16` | Reindeer Maze |
| `day17` | Chronospatial Computer |