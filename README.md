# adventsolve

Solvers for a selection of Advent of Code puzzles from the 2017 and 2018
events. Each day is a small module with plain functions you can call from
Python, plus a console command that reads your puzzle input and prints the
answer. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every solved day has its own command:

| Year | Commands |
|------|----------|
| 2017 | `aoc2017-day01` … `aoc2017-day07` |
| 2018 | `aoc2018-day01` … `aoc2018-day09`, `aoc2018-day11`, `aoc2018-day14`, `aoc2018-day18` |

Options may be written with one dash or two (`-part b` or `--part b`).
Run any command with `--help` to see its options:

```
aoc2017-day01 --help
aoc2018-day07 --help
```

Common options:

- `--part a|b` picks the half of the puzzle to solve (default `a`).
- `--file PATH` names the input file. The 2017 commands default to `input`,
  the 2018 commands to `input1.txt`.

Some days have their own options:

- `aoc2017-day01` … `aoc2017-day07` accept `--debug`; it has no effect on
  the answer. `aoc2017-day03` ignores `--file` and always solves for 368078.
- `aoc2018-day05` and `aoc2018-day11`: `--cpuprofile PATH` writes the CPU
  seconds spent solving to `PATH`.
- `aoc2018-day06`: `--distance N` sets the limit for part b (default 10000);
  `--debug` prints the parsed points and the grid bounds.
- `aoc2018-day07`: `--const N` adds `N` seconds to every step and
  `--workers N` sets the number of workers (default 1) for part b.
- `aoc2018-day09`: `--players N` and `--marble N` (defaults 9 and 25);
  `--print` shows the circle after every turn.
- `aoc2018-day11`: `--puzzle N` is the grid serial number (default 7165) and
  `--grid N` the grid size (default 300).
- `aoc2018-day14`: `--recipes N` and `--answers N` for part a (defaults 10
  and 10), `--result DIGITS` for part b (default `51589`); `--print` shows
  the scoreboard in part a.
- `aoc2018-day18`: `--grid N` is the side of the square area and
  `--minutes N` the number of minutes to run (defaults 10 and 10). Part b
  also prints each minute at which an earlier state's counts turn up again.

How a part other than `a` or `b` is handled varies: most commands print a
message saying so; `aoc2018-day01` and `aoc2018-day02` treat it as part b;
`aoc2018-day03` and `aoc2018-day04` print nothing.

## Python API

The functions behind the commands are importable, so you can work with
strings and lists directly instead of files:

```python
from adventsolve.y2017 import day01, day03, day04

day01.captcha_sum("1122", 1)        # 3
day01.captcha_sum("1212", 2)        # 6

day03.spiral_distance(1024)         # 31
day03.first_larger_adjacent_sum(60) # 122

day04.is_valid_passphrase("aa bb cc dd aa", "a")          # False
day04.is_valid_passphrase("abcde xyz ecdab", "b")         # False
```

More entry points, day by day:

- `adventsolve.y2017.day02`: `row_difference`, `row_divisor_quotient`, `checksum`
- `adventsolve.y2017.day05`: `escape_steps`, `solve`
- `adventsolve.y2017.day06`: `redistribute`, `cycles_until_repeat`, `loop_size`, `solve`
- `adventsolve.y2017.day07`: `Program`, `parse_tower`, `find_bottom`, `stack_weight`,
  `unbalanced_child`, `corrected_weight`, `solve`
- `adventsolve.y2018.day01`: `total_frequency`, `first_repeated_frequency`
- `adventsolve.y2018.day02`: `box_checksum`, `find_close_ids`
- `adventsolve.y2018.day03`: `Claim`, `parse_claim`, `overlap_area`, `intact_claim`
- `adventsolve.y2018.day04`: `SleepRecord`, `parse_guard_log`, `sleepiest_guard`,
  `sleepiest_minute`, `solve`
- `adventsolve.y2018.day05`: `react_once`, `react`, `remove_unit`, `shortest_improved`
- `adventsolve.y2018.day06`: `Point`, `parse_points`, `bounds`, `largest_finite_area`,
  `safe_region_size`
- `adventsolve.y2018.day07`: `parse_steps`, `step_order`, `timed_order`
- `adventsolve.y2018.day08`: `parse_license`, `metadata_sum`, `node_value`
- `adventsolve.y2018.day09`: `play_marbles`
- `adventsolve.y2018.day11`: `power_level`, `power_grid`, `best_square`
- `adventsolve.y2018.day14`: `scores_after`, `recipes_before`
- `adventsolve.y2018.day18`: `parse_area`, `count_neighbours`, `step`, `resource_value`

Bad input is reported by raising `ValueError` (for example a malformed claim,
log entry or step line, or a frequency list that can never repeat).

Shared helpers live in `adventsolve.common`: `read_lines`, `parse_puzzle_args`,
`to_ints`, `format_grid` and `manhattan_distance`.

## What it does not do

Only the days listed above are solved; there are no solvers for the other
2017 and 2018 puzzles, such as 2018 days 10, 12, 13, 15, 16 and 17. The 2018
day 18 part b command reports repeating states but does not extrapolate the
answer to a very large number of minutes by itself.