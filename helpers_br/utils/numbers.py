from __future__ import annotations
import math
from decimal import Decimal
from typing import Optional, Union

from babel.numbers import format_currency as _babel_currency, format_decimal

from .config import setting

Number = Union[int, float, Decimal]

# do maior para o menor
_ABREVIACOES = [
    (1e33, "D"),
    (1e30, "N"),
    (1e27, "O"),
    (1e24, "Se"),
    (1e21, "S"),
    (1e18, "Qi"),
    (1e15, "Q"),
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
]

def _check_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError("O valor deve ser numérico (int, float ou Decimal)")

def is_numeric(value) -> bool:
    """Números (exceto NaN e bool) ou strings que representam um número."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Decimal)):
        return True
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, str) and value.strip():
        try:
            return not math.isnan(float(value.strip()))
        except ValueError:
            return False
    return False

def to_number(value) -> Number:
    """Converte para número; retorna NaN quando não numérico."""
    if not is_numeric(value):
        return math.nan
    if isinstance(value, (int, float, Decimal)):
        return value
    s = value.strip()
    return int(s) if s.lstrip("+-").isdigit() else float(s)

def is_odd(value: int) -> bool:
    return value % 2 != 0

def is_even(value: int) -> bool:
    return value % 2 == 0

def format_currency(value: Number, currency: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Formata valor monetário (padrão: BRL em pt_BR).
    format_currency(1234.5) -> 'R$ 1.234,50'
    """
    _check_number(value)
    result = _babel_currency(value, currency or setting("HELPERS_CURRENCY"), locale=locale or setting("HELPERS_LOCALE"))
    # espaço não quebrável -> espaço comum
    return result.replace("\u00a0", " ")

def format_number(value: Number, locale: Optional[str] = None) -> str:
    """Número com separadores do locale e no mínimo 2 casas decimais."""
    _check_number(value)
    return format_decimal(value, format="#,##0.00#", locale=locale or setting("HELPERS_LOCALE"))

def abbreviate_number(value: Number, fraction_digits: int = 2, remove_end_zero: bool = True) -> str:
    """
    1500 -> '1.5K', 2_000_000 -> '2M', 123456789 -> '123.46M'.
    Abaixo de mil, devolve o próprio número como string.
    """
    _check_number(value)
    for threshold, suffix in _ABREVIACOES:
        if value >= threshold:
            s = f"{float(value) / threshold:.{fraction_digits}f}"
            if remove_end_zero and "." in s:
                s = s.rstrip("0").rstrip(".")
            return f"{s}{suffix}"
    return str(value)

def pad_zeros_by_ref(value: int, ref: int) -> str:
    """Completa com zeros à esquerda até o número de dígitos de `ref` (ex.: 7, 150 -> '007')."""
    width = len(str(abs(int(ref))))
    return str(value).zfill(width)
