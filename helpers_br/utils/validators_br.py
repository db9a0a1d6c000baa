from __future__ import annotations
import random
import re
from datetime import date
from typing import Optional

from .config import setting
from .text import only_numbers

_CPF_RE = re.compile(r"^\d{11}$|^\d{3}\.\d{3}\.\d{3}-\d{2}$")
_CNPJ_NUM_RE = re.compile(r"^\d{14}$|^\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}$")
_CNPJ_ALFA_RE = re.compile(r"^[A-Z0-9]{14}$|^[A-Z0-9]{2}\.[A-Z0-9]{3}\.[A-Z0-9]{3}/[A-Z0-9]{4}-[A-Z0-9]{2}$", re.I)
_CEP_RE = re.compile(r"^\d{8}$|^\d{5}-\d{3}$")

_PESOS_CNPJ = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

# ---------------- CPF ----------------

def _cpf_dv(base: str) -> int:
    peso = len(base) + 1
    s = sum(int(d) * (peso - i) for i, d in enumerate(base))
    return (s * 10) % 11 % 10

def is_valid_cpf(cpf: str) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita '52998224725' ou '529.982.247-25'.
    """
    if not isinstance(cpf, str) or not _CPF_RE.match(cpf):
        return False
    n = only_numbers(cpf)
    if n == n[0] * 11:
        return False
    return _cpf_dv(n[:9]) == int(n[9]) and _cpf_dv(n[:10]) == int(n[10])

def format_cpf(cpf: str, fallback: Optional[str] = None) -> str:
    n = only_numbers(cpf)
    if len(n) != 11:
        return cpf if fallback is None else fallback
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"

def gerar_cpf() -> str:
    """CPF aleatório válido (só dígitos), útil para testes e dados fictícios."""
    base = "".join(str(random.randint(0, 9)) for _ in range(9))
    d1 = _cpf_dv(base)
    d2 = _cpf_dv(base + str(d1))
    return f"{base}{d1}{d2}"

# ---------------- CNPJ ----------------

def _cnpj_dv(chars: str) -> int:
    # ord(c) - 48: dígitos valem 0..9, letras A..Z valem 17..42
    pesos = _PESOS_CNPJ[len(_PESOS_CNPJ) - len(chars):]
    s = sum((ord(c) - 48) * p for c, p in zip(chars, pesos))
    r = s % 11
    return 0 if r < 2 else 11 - r

def _cnpj_alfa_ativo(today: Optional[date]) -> bool:
    desde = date.fromisoformat(setting("HELPERS_CNPJ_ALFA_DESDE"))
    return (today or date.today()) >= desde

def is_valid_cnpj(cnpj: str, today: Optional[date] = None) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    A partir de HELPERS_CNPJ_ALFA_DESDE aceita também o formato alfanumérico
    (12 primeiras posições em [A-Z0-9]); os DVs continuam numéricos.
    """
    if not isinstance(cnpj, str):
        return False
    alfa = _cnpj_alfa_ativo(today)
    if not (_CNPJ_ALFA_RE if alfa else _CNPJ_NUM_RE).match(cnpj):
        return False

    n = re.sub(r"[^A-Z0-9]", "", cnpj.upper())
    if len(n) != 14 or n == n[0] * 14:
        return False
    if not n[12:].isdigit():
        return False

    d1 = _cnpj_dv(n[:12])
    d2 = _cnpj_dv(n[:12] + str(d1))
    return n[-2:] == f"{d1}{d2}"

def format_cnpj(cnpj: str, fallback: Optional[str] = None) -> str:
    n = re.sub(r"[^A-Z0-9]", "", (cnpj or "").upper())
    if len(n) != 14:
        return cnpj if fallback is None else fallback
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"

def gerar_cnpj() -> str:
    base = "".join(str(random.randint(0, 9)) for _ in range(12))
    d1 = _cnpj_dv(base)
    d2 = _cnpj_dv(base + str(d1))
    return f"{base}{d1}{d2}"

# ---------------- CEP / Telefone ----------------

def is_valid_cep(cep: str) -> bool:
    return isinstance(cep, str) and bool(_CEP_RE.match(cep.strip()))

def format_cep(cep: str, fallback: Optional[str] = None) -> str:
    n = only_numbers(cep)
    if len(n) != 8:
        return cep if fallback is None else fallback
    return f"{n[:5]}-{n[5:]}"

def format_telefone(telefone: str, ddd_padrao: str = "", fallback: Optional[str] = None) -> str:
    """
    '11987654321' -> '11 98765-4321'; '12345678' -> '1234-5678'.
    Com menos de 10 dígitos, prefixa ddd_padrao (se informado).
    """
    n = only_numbers(telefone)
    if len(n) < 10:
        n = only_numbers(ddd_padrao) + n
    if len(n) in (8, 9):
        return f"{n[:-4]}-{n[-4:]}"
    if len(n) in (10, 11):
        return f"{n[:2]} {n[2:-4]}-{n[-4:]}"
    return telefone if fallback is None else fallback
