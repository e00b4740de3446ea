from datetime import date, time
from decimal import Decimal

import pytest

from hr_portal.common.datetime_utils import format_hhmm, hours_between, parse_hhmm, parse_iso_date, parse_month
from hr_portal.core.exceptions import ValidationError


def test_hours_between_whole_and_fractional():
    d = date(2026, 1, 5)
    assert hours_between(d, time(9, 0), time(17, 30)) == Decimal("8.50")
    assert hours_between(d, time(9, 0), time(9, 20)) == Decimal("0.33")
    assert hours_between(d, time(9, 0), time(9, 1)) == Decimal("0.02")


def test_hours_between_can_be_negative():
    assert hours_between(date(2026, 1, 5), time(22, 0), time(6, 0)) == Decimal("-16.00")


def test_parse_and_format_boundaries():
    assert parse_iso_date("2026-02-28") == date(2026, 2, 28)
    assert parse_hhmm("07:05") == time(7, 5)
    assert format_hhmm(time(7, 5)) == "07:05"


def test_parse_month():
    assert parse_month("2026-03") == "2026-03"
    with pytest.raises(ValidationError):
        parse_month("03/2026")
