"""Running several day solutions as child processes and collecting their timings."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from advent.day import Day, all_days
from advent.readme_benchmarks import get_path_for_bin
from advent.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from advent.timings import Timing, Timings

_ENTRY = "from advent.solutions.day{day} import main; main()"
_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_UNITS = (("ns", 1.0), ("µs", 1_000.0), ("ms", 1_000_000.0))


def run_multi(days_to_run: Iterable[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the solutions of the given days in order; timings when ``is_timed``."""
    wanted = set(days_to_run)
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in wanted:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None
    result = Timings(timings)
    total_millis = result.total_millis()
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}"
    )
    return result


def _forward(stream: TextIO) -> None:
    for line in stream:
        print(line.rstrip("\n"), file=sys.stderr)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution of ``day`` in a child process, echoing and returning its output lines.

    Days without a solution module give an empty list.
    """
    if not Path(get_path_for_bin(day)).exists():
        return []

    command = [sys.executable]
    if is_release:
        command.append("-O")
    command += ["-c", _ENTRY.format(day=day)]
    if is_timed:
        command.append("--time")

    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    proc = subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        env=env,
    )
    if proc.stdout is None or proc.stderr is None:
        raise BrokenPipeError("could not read the output of the solution")

    forwarder = threading.Thread(target=_forward, args=(proc.stderr,), daemon=True)
    forwarder.start()

    output = []
    for raw in proc.stdout:
        line = raw.rstrip("\n")
        print(line)
        output.append(line)

    forwarder.join()
    proc.wait()
    return output


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the part timings printed by a timed solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)
    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos
    return timing


def _parse_float(text: str) -> float | None:
    if not _FLOAT.fullmatch(text):
        return None
    return float(text)


def parse_time(line: str) -> tuple[str, float] | None:
    """The duration text of a timing line and its value in nanoseconds."""
    timing = line.split(" samples)", 1)[0].split("(")[-1].split("@", 1)[0].strip()
    for unit, factor in _UNITS:
        if unit in timing:
            value = _parse_float(timing.split(unit, 1)[0])
            break
    else:
        factor = 1_000_000_000.0
        value = _parse_float(timing.split("s", 1)[0])
    if value is None:
        return None
    return timing, value * factor