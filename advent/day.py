"""Validated day numbers of the advent calendar."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_SERVER_TZ = timezone(timedelta(hours=-5))
_DAY_PATTERN = re.compile(r"\+?[0-9]+")
_MESSAGE = "expecting a day number between 1 and 25"


class DayParseError(ValueError):
    """Raised for a day number outside 1..25 or text that is not one."""

    def __init__(self, message: str = _MESSAGE) -> None:
        super().__init__(message)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A day of advent, 1 to 25; it displays as two digits."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DayParseError()
        if not 1 <= self.value <= 25:
            raise DayParseError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a decimal day number such as ``"8"`` or ``"08"``."""
        if not _DAY_PATTERN.fullmatch(text):
            raise DayParseError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Day | None:
        """The current day on the puzzle server, if it is 1 to 25 December."""
        now = datetime.now(_SERVER_TZ)
        if now.month == 12 and now.day <= 25:
            return cls(now.day)
        return None

    def _key(self, other) -> int | None:
        if isinstance(other, Day):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value == key

    def __lt__(self, other) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value < key

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"{self.value:02d}"

    def __int__(self) -> int:
        return self.value


def all_days() -> Iterator[Day]:
    """Every day of advent, from the 1st to the 25th."""
    return (Day(n) for n in range(1, 26))