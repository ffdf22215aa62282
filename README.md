# adventsolve

Solvers for a series of daily programming puzzles: number lists, grids,
mazes, a tiny virtual machine, graphs and logic circuits. Each day has its
own module, and every solver works on the puzzle input as plain text. You can
pass it the contents of a file or a string typed into a test.

The modules are `adventsolve.day01`, `day02`, and then `day04` through
`day25`. There is no module for day 3.

`adventsolve.grid` holds a reusable two-dimensional `Grid` type.

The package has no dependencies beyond the standard library and needs
Python 3.10 or later.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## The command

```
adventsolve DAY [INPUT]
```

This runs the solver for `DAY` on the file `INPUT`. If `INPUT` is left out or
is `-`, the input is read from standard input. When a day has several answers,
the command prints them as `p1: ...`, `p2: ...`, and so on. Otherwise it prints
the single answer.

Each day runs with its puzzle defaults:

- 75 blinks on day 11.
- A 71×71 memory space with 1024 fallen bytes on day 18.
- Shortcuts of up to 20 steps that save at least 100 on day 20.
- Two robot layers on day 21.

Some days print only part of what the library offers:

- Day 14 prints the safety factor.
- Day 17 prints the program's output, joined with commas.

If the input is malformed, the command writes `error: ...` to standard error
and exits with status 1. To list the options:

```
adventsolve --help
```

## The library

Every day module takes the raw puzzle text. Most modules have a `solve(text)`
function that returns the day's answers, along with smaller functions for the
individual steps:

```python
from pathlib import Path

from adventsolve import day01, day11, day22

text = Path("day1.txt").read_text()
print(day01.solve(text))                    # (total distance, similarity score)

print(day11.count_stones([125, 17], 25))    # stones after 25 blinks
print(day22.next_secret(123))               # next number in the secret sequence
```

On some days the entry point has a different name, or the function takes
parameters that the puzzle fixes:

- `day12.fencing_price(text)` returns the fencing price. `day12.find_regions(grid)` returns `Region` objects with `area`, `perimeter` and `price`.
- `day13.total_cost(text, offset)` returns the token cost. `offset` moves every prize on both axes.
- `day14.safety_factor(robots, size, seconds)` returns the safety factor. `day14.render(robots, size, seconds)` draws the room as text.
- `day15.solve(text)` runs the narrow warehouse and `day15.solve_wide(text)` runs the doubled one.
- `day16.lowest_score(text)` returns the cheapest path score through the maze.
- `day17.run_program(a, b, c, program)` runs the three-bit machine. `day17.find_self_output(program, target, start, limit)` searches values of register A one by one for a given output.
- `day18.solve(text, size, take)` returns the shortest path and the first byte that blocks the exit.
- `day20.count_cheats(text, max_cheat, min_saving)` counts the shortcuts.
- `day21.complexity(text, robots)` returns the summed complexity of the codes.
- `day23.solve(text)` returns the number of triangles with a `t` computer and the password of the largest clique.
- `day24.solve(text)` returns the numbers on the `x`, `y` and `z` wires after simulation.
- `day25.count_fits(text)` returns how many lock and key pairs fit.

### The grid

```python
from adventsolve.grid import Grid

grid = Grid.from_str("#.#\n.@.\n#.#")
start = grid.find_first(lambda c: c == "@")
for pos in grid.adjacent_cells(start):
    if grid.contains(pos):
        print(pos, grid[pos])
print(grid.render())
```

Positions are `(x, y)` tuples, where `x` is the column and `y` is the row.

Building a grid:

- From text with `Grid.from_str`.
- From a flat sequence of cells with `Grid.from_flat`.
- Filled with one value with `Grid.filled`.

Reading and changing cells:

- Iterate over cells, coordinates or both with `cells`, `coords` and `cells_enumerate`.
- Check bounds with `contains`.
- Look up safely with `get`, which returns `None` outside the grid.
- Index and assign by position. Positions out of bounds raise `IndexError`.

Neighbours and new grids:

- `adjacent_cells` and `adjacent_eight_cells` give neighbouring positions and do not check bounds.
- `map` and `map_enumerate` build a new grid.

`render` shows booleans as `#` and `.`, and any other value with `str`.

## What it does not do

- Day 3 has no solver.
- Day 14 does not animate the robots over time. Use `render` for any single second.
- Day 17's search for a self-reproducing program tries values of register A one at a time. It does not reason about the program.
- Day 21 types every code with one fixed route: horizontal moves first, unless that would cross the gap. It does not search for the shortest sequence of presses.
- Day 24 simulates the circuit. It does not look for swapped output wires.