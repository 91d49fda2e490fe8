# advent

A workspace for daily puzzle solutions. It bundles:

- grid helpers: `Point` and `Direction` (with the constants `UP`, `DOWN`,
  `LEFT`, `RIGHT`, `ORTHOGONAL`, `DIAGONALS` and `ALL_AROUND`) in
  `advent.geometry`, and a two-dimensional `Grid` in `advent.grid`;
- the `Day` type (a day number from 1 to 25, shown as two digits) and
  `all_days()` in `advent.day`;
- solutions for days 1 to 6 in `advent.solutions` (`day01` … `day06`), each
  exposing `part_one(text)`, `part_two(text)` and `main()`;
- a command-line tool, `advent`, that scaffolds new days, runs and times
  solutions, fetches inputs and keeps a benchmark table in `README.md`
  up to date.

## Directory layout

The tool works relative to the current directory, which is expected to be a
checkout holding the `advent` package:

| Path | Contents |
| --- | --- |
| `advent/solutions/dayDD.py` | the solution module for day `DD` |
| `data/inputs/DD.txt` | your puzzle input for day `DD` |
| `data/examples/DD.txt` | the example input from the puzzle text |
| `data/puzzles/DD.md` | the puzzle description |
| `data/timings.json` | stored benchmark results |
| `README.md` | the file whose benchmark table is updated |

Days are written as two digits (`01` … `25`); a day outside 1–25 is
rejected with `expecting a day number between 1 and 25`. The directories
are not created for you: `scaffold` fails if `data/inputs`,
`data/examples` or `advent/solutions` is missing.

## Commands

```
advent scaffold 7                 # create advent/solutions/day07.py and empty input/example files
advent scaffold 7 --download      # ... and fetch the input and puzzle text
advent scaffold 7 --overwrite     # replace an existing module file
advent download 7                 # fetch input and puzzle text
advent read 7                     # print the puzzle description
advent solve 7                    # run both parts once
advent solve 7 --release          # run in an optimised interpreter (python -O)
advent solve 7 --dhat             # run with tracemalloc enabled
advent solve 7 --submit 1         # run and submit the answer to part 1
advent all                        # run every day that has a solution module
advent all --release              # ... in an optimised interpreter
advent time 7                     # benchmark one day
advent time --all --store         # benchmark every day and store the results
advent today                      # scaffold, download and read today's puzzle
```

Each part is printed as `Part 1: <answer> (<time>)`, or `Part 1: ✖` when
the solution has no answer. Days without a solution module print
`Not solved.` under `all` and `time`. Arguments the tool does not
recognise are reported with a warning and otherwise ignored.

`download`, `read` and `--submit` call the external `aoc` command-line
client, which must be installed and logged in; without it the command
exits with an error. Set `AOC_YEAR` in the environment to choose a year
other than the client's default.

`today` works only from the 1st to the 25th of December (server time,
UTC−5); on other days use `scaffold` with a day number.

### Benchmarks

`advent time` runs each part repeatedly (at least 10 and at most 10,000
samples, aiming for about one second) and prints the average and the
total. Without `--all`, days that already have stored timings for both
parts are skipped. With `--store` the results are merged into
`data/timings.json` and written into `README.md` between two
`<!--- benchmarking table --->` markers; if the markers are missing or
appear more than twice, the README is left alone and
`Failed to store updated benchmarks.` is printed.

## Using the helpers

```python
from advent.geometry import Direction, Point
from advent.grid import Grid

grid = Grid.char_grid("123\n456\n789")
centre = Point(1, 1)
print(grid[centre])                             # 5
print(grid[centre + Direction.from_char("U")])  # 2
print(grid.find_position_of("9"))               # (l:2, c:2)
```

```python
from advent.inputs import read_file
from advent.day import Day
from advent.solutions import day01

print(day01.part_one(read_file("inputs", Day(1))))
```

`Grid` indexing raises `IndexError` outside the grid; `get_item` returns
`None` instead. `Timings` in `advent.timings` reads and writes the stored
benchmark JSON.

## What it does not do

- Only days 1 to 6 have solutions; other days start from the empty module
  that `scaffold` writes, whose parts return `None`.
- It does not download, read or submit puzzles by itself; that is left to
  the `aoc` client.
- `--dhat` only turns tracemalloc on for the run; no memory report is
  printed.