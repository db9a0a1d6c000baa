from __future__ import annotations
import re
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from babel.dates import get_day_names, get_month_names

from ..models import DateParts
from .config import setting

DateLike = Union[datetime, date, str, int, float]

# mais longos primeiro; [texto] é literal
_TOKENS_RE = re.compile(r"\[([^\]]*)\]|yyyy|yy|MMMM|MMM|MM|M|dddd|ddd|dd|d|HH|H|hh|h|mm|ss|SSS|A|a")
_OFFSET_RE = re.compile(r"([zZ]|[+-]\d{2}:?\d{2})$")

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def utcnow_iso() -> str:
    return utcnow().isoformat()


def parse_date(value: DateLike) -> datetime:
    """
    Normaliza a entrada para datetime:
    - int/float: timestamp em milissegundos (UTC)
    - str com 'Z' ou offset: convertida para UTC
    - str sem fuso: horário local (naive)
    """
    try:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        if isinstance(value, str):
            raw = value.strip()
            if _OFFSET_RE.search(raw):
                raw = re.sub(r"[zZ]$", "+00:00", raw)
                return datetime.fromisoformat(raw).astimezone(timezone.utc)
            return datetime.fromisoformat(raw.replace("/", "-"))
    except (ValueError, OverflowError, OSError) as e:
        raise ValueError("Data inválida") from e
    raise ValueError("Data inválida")

def is_date(value) -> bool:
    try:
        parse_date(value)
        return True
    except ValueError:
        return False

def is_date_between(value: DateLike, start: DateLike, end: DateLike) -> bool:
    return parse_date(start) <= parse_date(value) <= parse_date(end)

def is_leap_year(year: Optional[int] = None) -> bool:
    y = date.today().year if year is None else year
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0

def date_parts(value: DateLike) -> DateParts:
    d = parse_date(value)
    return DateParts(
        year=d.year, month=d.month, day=d.day,
        hour=d.hour, minute=d.minute, second=d.second,
        timestamp=int(d.timestamp() * 1000),
    )

def months(locale: Optional[str] = None, width: str = "wide") -> List[str]:
    """Nomes dos meses (janeiro..dezembro) com inicial maiúscula."""
    names = get_month_names(width, locale=locale or setting("HELPERS_LOCALE"))
    return [names[m][:1].upper() + names[m][1:] for m in range(1, 13)]

def weekdays(locale: Optional[str] = None, width: str = "wide") -> List[str]:
    """Dias da semana começando no domingo, com inicial maiúscula."""
    names = get_day_names(width, locale=locale or setting("HELPERS_LOCALE"))
    # babel: 0 = segunda ... 6 = domingo
    order = [6, 0, 1, 2, 3, 4, 5]
    return [names[i][:1].upper() + names[i][1:] for i in order]

def format_date(value: DateLike, pattern: str, locale: Optional[str] = None, utc: bool = False) -> str:
    """
    Formata data por tokens:
      yyyy yy | MMMM MMM MM M | dddd ddd dd d | HH H hh h | mm ss SSS | A a
    Texto entre colchetes é literal: "dd [de] MMMM [de] yyyy" -> "03 de março de 2025".
    """
    d = parse_date(value)
    if utc and d.tzinfo is not None:
        d = d.astimezone(timezone.utc)
    loc = locale or setting("HELPERS_LOCALE")
    month_wide = get_month_names("wide", locale=loc)[d.month]
    month_abbr = get_month_names("abbreviated", locale=loc)[d.month]
    day_wide = get_day_names("wide", locale=loc)[d.weekday()]
    day_abbr = get_day_names("abbreviated", locale=loc)[d.weekday()]
    hr12 = d.hour % 12 or 12
    ampm = "am" if d.hour < 12 else "pm"

    values = {
        "yyyy": f"{d.year:04d}",
        "yy": f"{d.year:04d}"[-2:],
        "MMMM": month_wide,
        "MMM": month_abbr.rstrip(".")[:3],
        "MM": f"{d.month:02d}",
        "M": str(d.month),
        "dddd": day_wide,
        "ddd": day_abbr.rstrip(".")[:3],
        "dd": f"{d.day:02d}",
        "d": str(d.day),
        "HH": f"{d.hour:02d}",
        "H": str(d.hour),
        "hh": f"{hr12:02d}",
        "h": str(hr12),
        "mm": f"{d.minute:02d}",
        "ss": f"{d.second:02d}",
        "SSS": f"{d.microsecond // 1000:03d}",
        "A": ampm.upper(),
        "a": ampm,
    }

    def _sub(m: re.Match) -> str:
        if m.group(1) is not None:
            return m.group(1)
        return values[m.group(0)]

    return _TOKENS_RE.sub(_sub, pattern)
