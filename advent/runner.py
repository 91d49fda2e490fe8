"""Running, timing and reporting solution parts."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

from advent import aoc_cli
from advent.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"
_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)
_PART_PATTERN = re.compile(r"\+?[0-9]+")


def run_part(
    func: Callable[[str], Any],
    text: str,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run one part, print its result and timing, and submit it when asked."""
    argv = sys.argv[1:] if argv is None else list(argv)
    part_str = f"Part {part}"
    result, duration, samples = run_timed(
        func, text, lambda r: print_result(r, part_str, ""), "--time" in argv
    )
    print_result(result, part_str, format_duration(duration, samples))
    if result is not None:
        try:
            submit_result(result, day, part, argv)
        except aoc_cli.AocCommandError as exc:
            print(f"failed to submit result: {exc}", file=sys.stderr)


def run_timed(
    func: Callable[[str], Any],
    text: str,
    hook: Callable[[Any], None],
    timed: bool,
) -> tuple[Any, int, int]:
    """Run ``func`` once; benchmark it when ``timed``. Returns result, nanoseconds, samples."""
    start = time.perf_counter_ns()
    result = func(text)
    base_time = time.perf_counter_ns() - start
    hook(result)
    if timed:
        duration, samples = bench(func, text, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Callable[[str], Any], text: str, base_time: int) -> tuple[int, int]:
    """Run ``func`` for about a second (10 to 10000 runs); average nanoseconds and runs."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = min(max(1_000_000_000 // max(base_time, 10), 10), 10_000)
    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(text)
        timers.append(time.perf_counter_ns() - start)
    return sum(timers) // len(timers), iterations


def _format_nanos(nanos: int) -> str:
    secs, sub = divmod(nanos, 1_000_000_000)
    if secs:
        integer, frac, divisor, unit = secs, sub, 100_000_000, "s"
    elif sub >= 1_000_000:
        integer, frac, divisor, unit = sub // 1_000_000, sub % 1_000_000, 100_000, "ms"
    elif sub >= 1_000:
        integer, frac, divisor, unit = sub // 1_000, sub % 1_000, 100, "µs"
    else:
        integer, frac, divisor, unit = sub, 0, 1, "ns"
    digit = 0
    if frac > 0:
        digit, frac = divmod(frac, divisor)
        divisor //= 10
        if frac > 0 and frac >= divisor * 5:
            digit += 1
            if digit == 10:
                digit = 0
                integer += 1
    return f"{integer}.{digit}{unit}"


def format_duration(duration_ns: int, samples: int) -> str:
    """Timing suffix such as `` (1.2ms)`` or `` (1.2ms @ 800 samples)``."""
    text = _format_nanos(duration_ns)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a result; without ``duration_str`` it is an unfinished line to overwrite."""
    intermediate = not duration_str
    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: ✖             ")
        return
    shown = str(result)
    if "\n" in shown:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(shown)
    else:
        line = f"{part}: {ANSI_BOLD}{shown}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def submit_result(result: Any, day: Day, part: int, argv: Sequence[str]):
    """Submit ``result`` if ``argv`` holds ``--submit <part>`` for this part.

    Returns the finished ``aoc`` process, or None when nothing was submitted.
    """
    argv = list(argv)
    if "--submit" not in argv:
        return None
    if len(argv) < 2:
        sys.exit(_USAGE)
    part_index = argv.index("--submit") + 1
    if part_index >= len(argv) or not _PART_PATTERN.fullmatch(argv[part_index]):
        sys.exit(_USAGE)
    part_submit = int(argv[part_index])
    if part_submit > 0xFF:
        sys.exit(_USAGE)
    if part_submit != part:
        return None
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        sys.exit(_AOC_MISSING)
    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))