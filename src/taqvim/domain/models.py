from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Union

from .errors import InvalidArgument


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A concrete calendar day. ``month`` is zero-based (0 = January)."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise InvalidArgument(f"month must be in [0, 11], got {self.month!r}")
        if not 1 <= self.day <= 31:
            raise InvalidArgument(f"day must be in [1, 31], got {self.day!r}")

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month - 1, day=value.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    def to_date(self) -> date:
        try:
            return date(self.year, self.month + 1, self.day)
        except ValueError as exc:
            raise InvalidArgument(str(exc)) from exc

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True)
class Blank:
    """Leading padding cell before the first day of the month."""


@dataclass(frozen=True, slots=True)
class Day:
    date: CalendarDate


Cell = Union[Blank, Day]


@dataclass(frozen=True, slots=True)
class CalendarEvent:
    id: str
    date: CalendarDate
    title: str
    description: str = ""

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "title": self.title,
            "description": self.description,
        }
