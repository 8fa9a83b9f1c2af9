"""Calendar date helpers shared by every instrument renderer.

A calendar date is a ``datetime.date``; at the boundary it is exchanged as
a (year, month, day) triple.
"""

from __future__ import annotations

from datetime import date

# Placeholder for dates on default-constructed instruments.
UNSET_DATE: date = date.min


def from_ymd(year: int, month: int, day: int) -> date:
    return date(year, month, day)


def to_ymd(d: date) -> tuple[int, int, int]:
    return (d.year, d.month, d.day)


def format_date(d: date) -> str:
    """Render ``d`` as YYYY-MM-DD, every component zero padded.

    2024-03-07 -> "2024-03-07"; year 999 -> "0999-..."; UNSET_DATE ->
    "0001-01-01". Independent of locale.
    """
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
