from __future__ import annotations

from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import DATE_FORMAT, HOURS_PRECISION, MONTH_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_hhmm(value: str) -> time:
    """Parse a 24h HH:MM string into time."""
    return datetime.strptime(value, TIME_FORMAT).time()


def format_hhmm(value: time | datetime) -> str:
    return value.strftime(TIME_FORMAT)


def parse_month(value: str) -> str:
    """Validate a YYYY-MM month key and return it normalized."""
    try:
        return datetime.strptime((value or "").strip(), MONTH_FORMAT).strftime(MONTH_FORMAT)
    except ValueError:
        raise ValidationError("Invalid month (YYYY-MM)")


def parse_date_arg(value: str, field_name: str) -> date:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")


def hours_between(work_date: date, start: time, end: time) -> Decimal:
    """Elapsed hours between two times on the same day, rounded half-up to 2 places.

    Negative spans (check-out before check-in) are not clamped here.
    """
    started = datetime.combine(work_date, start)
    ended = datetime.combine(work_date, end)
    hours = Decimal((ended - started).total_seconds()) / Decimal(3600)
    return hours.quantize(Decimal(HOURS_PRECISION), rounding=ROUND_HALF_UP)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
