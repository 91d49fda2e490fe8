"""Calls to the ``aoc`` command-line client."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence

from advent.day import Day

_AOC = "aoc"
_YEAR_PATTERN = re.compile(r"\+?[0-9]+")


class AocCommandError(Exception):
    """Base class for failures of the ``aoc`` client."""


class AocCommandNotFound(AocCommandError):
    """The ``aoc`` client is not installed."""

    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class AocCommandNotCallable(AocCommandError):
    """The ``aoc`` client could not be started."""

    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class AocBadExitStatus(AocCommandError):
    """The ``aoc`` client finished with a non-zero status."""

    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.output = output


def check() -> None:
    """Raise :class:`AocCommandNotFound` unless ``aoc`` can be run."""
    try:
        subprocess.run([_AOC, "-V"], capture_output=True, check=False)
    except OSError as exc:
        raise AocCommandNotFound() from exc


def get_input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def _get_year() -> int | None:
    raw = os.environ.get("AOC_YEAR")
    if raw is None or not _YEAR_PATTERN.fullmatch(raw):
        return None
    year = int(raw)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Arguments for ``aoc``: extra options, optional year, day and command."""
    cmd_args = list(args)
    year = _get_year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        output = subprocess.run([_AOC, *args], check=False)
    except OSError as exc:
        raise AocCommandNotCallable() from exc
    if output.returncode != 0:
        raise AocBadExitStatus(output)
    return output


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description of ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download input and puzzle text of ``day`` into the data directory."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    output = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return output


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The client expects part and answer after the command.
    args = build_args("submit", [], day)
    args += [str(part), result]
    return _call_aoc_cli(args)