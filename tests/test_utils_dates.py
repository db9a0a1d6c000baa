from __future__ import annotations
from datetime import date, datetime, timezone
import pytest

from helpers_br.models import DateParts
from helpers_br.utils.dates import (
    utcnow, utcnow_iso, parse_date, format_date, date_parts,
    is_date, is_date_between, is_leap_year, months, weekdays,
)

def test_parse_date_inputs():
    assert parse_date(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert parse_date("2025-03-03T10:00:00Z") == datetime(2025, 3, 3, 10, 0, tzinfo=timezone.utc)
    assert parse_date("2025-03-03T10:00:00-03:00").hour == 13
    assert parse_date("2025/03/03 08:30") == datetime(2025, 3, 3, 8, 30)
    assert parse_date(date(2025, 3, 3)) == datetime(2025, 3, 3)
    with pytest.raises(ValueError, match="Data inválida"):
        parse_date("não é data")
    with pytest.raises(ValueError):
        parse_date(None)

def test_format_date_pt_br():
    d = datetime(2025, 3, 3, 14, 5, 9, 123000)
    assert format_date(d, "dd/MM/yyyy HH:mm:ss.SSS") == "03/03/2025 14:05:09.123"
    assert format_date(d, "dddd, dd [de] MMMM [de] yyyy") == "segunda-feira, 03 de março de 2025"
    assert format_date(d, "d/M/yy hh:mm A") == "3/3/25 02:05 PM"
    assert format_date(d, "h a") == "2 pm"

def test_format_date_other_locale_and_utc():
    d = datetime(2025, 3, 2)
    assert format_date(d, "dddd, dd MMMM yyyy", locale="en_US") == "Sunday, 02 March 2025"
    aware = datetime(2025, 3, 2, 23, 0, tzinfo=timezone.utc)
    assert format_date("2025-03-02T20:00:00-03:00", "dd HH", utc=True) == format_date(aware, "dd HH")

def test_date_parts_model():
    parts = date_parts("2023-08-01T12:30:15Z")
    assert isinstance(parts, DateParts)
    assert (parts.year, parts.month, parts.day) == (2023, 8, 1)
    assert (parts.hour, parts.minute, parts.second) == (12, 30, 15)
    assert parts.timestamp == 1690893015000
    assert parts.as_dict()["month"] == 8

def test_date_predicates():
    assert is_date("2024-02-29") and not is_date("2023-02-29")
    assert is_date_between("2025-01-15", "2025-01-01", "2025-01-31")
    assert not is_date_between("2025-02-15", "2025-01-01", "2025-01-31")
    assert is_leap_year(2024) and is_leap_year(2000)
    assert not is_leap_year(1900) and not is_leap_year(2023)

def test_month_and_weekday_names():
    ms = months()
    assert len(ms) == 12 and ms[0] == "Janeiro" and ms[2] == "Março"
    ws = weekdays()
    assert len(ws) == 7 and ws[0] == "Domingo" and ws[1] == "Segunda-feira"
    assert months(locale="en_US")[0] == "January"
    assert weekdays(locale="en_US")[0] == "Sunday"

def test_utcnow_is_aware_utc():
    agora = utcnow()
    assert agora.tzinfo is timezone.utc
    iso = utcnow_iso()
    assert iso.endswith("+00:00")
    assert parse_date(iso) >= agora
