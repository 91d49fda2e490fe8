"""Writing the benchmark table into the README."""

from __future__ import annotations

from pathlib import Path

from advent.day import Day
from advent.timings import Timings

MARKER = "<!--- benchmarking table --->"
README_PATH = Path("README.md")


class ReadmeError(ValueError):
    """Raised when the README does not hold a usable benchmark table."""


def get_path_for_bin(day: Day) -> str:
    """Relative path of the solution module for ``day``."""
    return f"./advent/solutions/day{day}.py"


def locate_table(readme: str) -> tuple[int, int]:
    """Start and end offsets of the table between the markers."""
    positions = []
    index = readme.find(MARKER)
    while index >= 0:
        positions.append(index)
        index = readme.find(MARKER, index + len(MARKER))
    if len(positions) > 2:
        raise ReadmeError("too many occurences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return positions[0], positions[-1] + len(MARKER)


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """The markdown table, wrapped in markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(
            f"| [Day {int(timing.day)}]({get_path_for_bin(timing.day)}) "
            f"| `{part_1}` | `{part_2}` |"
        )
    lines += ["", f"**Total: {total_millis:.2f}ms**", MARKER]
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """``text`` with its benchmark table replaced."""
    start, end = locate_table(text)
    return text[:start] + construct_table("##", timings, total_millis) + text[end:]


def update(timings: Timings, path: str | Path = README_PATH) -> None:
    """Rewrite the benchmark table in the README file at ``path``."""
    path = Path(path)
    readme = path.read_bytes().decode("utf-8", errors="replace")
    readme = update_content(readme, timings, timings.total_millis())
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(readme)