"""The commands of the command line: scaffolding, downloading, solving and timing days."""

from __future__ import annotations

import subprocess
import sys

from advent import aoc_cli, readme_benchmarks
from advent.day import Day, all_days
from advent.run_multi import run_multi
from advent.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)
_ENTRY = "from advent.solutions.day{day} import main; main()"

_MODULE_TEMPLATE = '''"""Day %DAY_NUMBER%."""

from __future__ import annotations

from collections.abc import Sequence

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(%DAY_NUMBER%)


def part_one(text: str) -> int | None:
    return None


def part_two(text: str) -> int | None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)
'''


def handle_all(is_release: bool) -> None:
    """Run the solutions of every day."""
    run_multi(set(all_days()), is_release, False)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        sys.exit(_AOC_MISSING)


def handle_download(day: Day) -> None:
    """Download input and puzzle of ``day``; exit on failure."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as exc:
        sys.exit(f"failed to call aoc-cli: {exc}")


def handle_read(day: Day) -> None:
    """Show the puzzle description of ``day``; exit on failure."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as exc:
        sys.exit(f"failed to call aoc-cli: {exc}")


def handle_scaffold(day: Day, overwrite: bool) -> None:
    """Create the solution module and empty input and example files for ``day``."""
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"
    module_path = f"advent/solutions/day{day}.py"

    try:
        handle = open(module_path, "w" if overwrite else "x", encoding="utf-8")
    except OSError as exc:
        sys.exit(f"Failed to create module file: {exc}")
    with handle:
        try:
            handle.write(_MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(int(day))))
        except OSError as exc:
            sys.exit(f"Failed to write module contents: {exc}")
    print(f'Created module file "{module_path}"')

    for path, kind in ((input_path, "input"), (example_path, "example")):
        try:
            with open(path, "w", encoding="utf-8"):
                pass
        except OSError as exc:
            sys.exit(f"Failed to create {kind} file: {exc}")
        print(f'Created empty {kind} file "{path}"')

    print("---")
    print(f"🎄 Type `advent solve {day}` to run your solution.")


def handle_solve(day: Day, release: bool, dhat: bool, submit_part: int | None) -> int:
    """Run the solution of ``day`` in a child process; returns its exit status.

    ``dhat`` starts the child with memory tracing; otherwise ``release`` runs it optimised.
    """
    command = [sys.executable]
    if dhat:
        command += ["-X", "tracemalloc"]
    elif release:
        command.append("-O")
    command += ["-c", _ENTRY.format(day=day)]
    if submit_part is not None:
        command += ["--submit", str(submit_part)]
    return subprocess.run(command, check=False).returncode


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark one day, all days, or the days not yet fully benchmarked."""
    stored_timings = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        days_to_run = {d for d in all_days() if not stored_timings.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True)
    if timings is None:
        timings = Timings()

    if store:
        merged = stored_timings.merge(timings)
        merged.store_file()
        print()
        try:
            readme_benchmarks.update(merged)
        except (OSError, readme_benchmarks.ReadmeError):
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")