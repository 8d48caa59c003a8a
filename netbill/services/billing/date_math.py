from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Protocol

from netbill.shared.errors import InvalidDate


class Clock(Protocol):
    def today(self) -> date: ...


class SystemClock:
    """Zegar systemowy (lokalna data). Tylko dla warstwy HTTP: core dostaje datę z zewnątrz."""

    def today(self) -> date:
        return datetime.now().date()


@dataclass(frozen=True)
class FixedClock:
    fixed: date

    def today(self) -> date:
        return self.fixed


def as_date(value: Any, *, field: str = "date") -> date:
    """Normalizacja do "północy": datetime -> date. Stringi nie przechodzą (parsuje warstwa schematów)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidDate(
        message=f"Nieprawidłowa albo brakująca data: {field}",
        details={"field": field, "value": repr(value)},
    )


def last_day_of_month(d: date) -> date:
    # prosta arytmetyka miesięcy bez zewnętrznych zależności
    if d.month == 12:
        next_month = date(d.year + 1, 1, 1)
    else:
        next_month = date(d.year, d.month + 1, 1)
    return next_month - timedelta(days=1)


def add_months(d: date, months: int) -> date:
    # zachowujemy dzień, ale „ściskamy” jeśli nowy miesiąc ma mniej dni
    year = d.year + (d.month - 1 + months) // 12
    month = (d.month - 1 + months) % 12 + 1

    # clamp day to last day of target month
    ld = last_day_of_month(date(year, month, 1)).day
    return date(year, month, min(d.day, ld))


def days_between(start: date, end: date) -> int:
    """end - start w pełnych dniach (ujemne, gdy end jest wcześniej)."""
    return (as_date(end, field="end") - as_date(start, field="start")).days
