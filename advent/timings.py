"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from advent.day import Day, DayParseError

TIMINGS_FILE_PATH = Path("data") / "timings.json"


class TimingsError(ValueError):
    """Raised for timing data that does not have the expected shape."""


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    total_nanos: float = 0.0

    def to_json_value(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "total_nanos": float(self.total_nanos),
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_json_value(cls, value: Any) -> Timing:
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        raw_day = value.get("day")
        try:
            day = Day.parse(raw_day) if isinstance(raw_day, str) else None
        except DayParseError:
            day = None
        if day is None:
            raise TimingsError("Expected timing.day to be a Day struct.")

        parts = []
        for key in ("part_1", "part_2"):
            if key not in value:
                raise TimingsError(f"Expected timing.{key} to be null or string.")
            raw = value[key]
            parts.append(raw if isinstance(raw, str) else None)

        total = value.get("total_nanos")
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day, parts[0], parts[1], float(total))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; empty timings if missing or invalid."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            return cls.from_json(text)
        except (OSError, ValueError):
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine with ``new``, whose entries win for days present in both."""
        data = [replace(t) for t in new.data]
        seen = {int(t.day) for t in data}
        for timing in self.data:
            if int(timing.day) not in seen:
                data.append(replace(timing))
                seen.add(int(timing.day))
        data.sort(key=lambda t: int(t.day))
        return Timings(data)

    def total_millis(self) -> float:
        return sum(t.total_nanos for t in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        return any(
            t.day == day and t.part_1 is not None and t.part_2 is not None for t in self.data
        )

    def to_json(self) -> str:
        return json.dumps({"data": [t.to_json_value() for t in self.data]}, indent=2)

    @classmethod
    def from_json(cls, text: str) -> Timings:
        try:
            document = json.loads(text)
        except ValueError:
            raise TimingsError("not valid JSON file.") from None
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls([Timing.from_json_value(entry) for entry in entries])