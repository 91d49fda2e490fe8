"""Reading puzzle inputs and examples from the ``data`` directory."""

from __future__ import annotations

from pathlib import Path

from advent.day import Day


def _data_file(folder: str, name: str) -> Path:
    return Path.cwd() / "data" / folder / name


def _read_text(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_file(folder: str, day: Day) -> str:
    """Contents of ``data/<folder>/<day>.txt`` below the working directory."""
    return _read_text(_data_file(folder, f"{day}.txt"))


def read_file_part(folder: str, day: Day, part: int) -> str:
    """Contents of ``data/<folder>/<day>-<part>.txt`` below the working directory."""
    return _read_text(_data_file(folder, f"{day}-{part}.txt"))