from __future__ import annotations
import re
import unicodedata
from typing import List, Optional

from .numbers import is_numeric

# partículas que ficam minúsculas em nomes próprios
_PARTICULAS = {"do", "da", "dos", "das", "de", "e"}

def strip_accents(s: str) -> str:
    if s is None:
        return ""
    return "".join(ch for ch in unicodedata.normalize("NFKD", str(s)) if not unicodedata.combining(ch))

def normalize(s: Optional[str]) -> str:
    """minúsculas, sem acentos e sem pontuação exótica; espaços normalizados"""
    if s is None:
        return ""
    s = strip_accents(str(s).lower())
    s = re.sub(r"[^a-z0-9\s]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s

def tokenize(s: str) -> List[str]:
    return [t for t in normalize(s).split() if t]

def slugify(s: str) -> str:
    s = normalize(s)
    return s.replace(" ", "-")

def only_numbers(s: Optional[str]) -> str:
    return re.sub(r"\D", "", s or "")

def title_case(name: str) -> str:
    """
    'maria da silva' -> 'Maria da Silva'.
    Partículas (do, da, dos, das, de, e) ficam minúsculas, exceto na primeira posição.
    """
    words = (name or "").strip().lower().split()
    return " ".join(
        w if i > 0 and w in _PARTICULAS else w[:1].upper() + w[1:]
        for i, w in enumerate(words)
    )

def mask_it(value: str, mask_char: str = "*", start: int = 0, end: Optional[int] = None) -> str:
    """
    Mascara value[start:end] com mask_char.
    start além do fim é trazido para o último caractere; end além do fim, para o fim.
    """
    if len(mask_char) != 1:
        raise ValueError("mask_char deve ter exatamente um caractere")
    end = len(value) if end is None else int(end)
    start = int(start)
    if start > len(value):
        start = len(value) - 1
    if end > len(value):
        end = len(value)
    if start < 0 or start > end:
        raise ValueError("Índices inicial/final inválidos")
    return value[:start] + mask_char * (end - start) + value[end:]

def mask_it_parts(text: str, mask_char: str = "*", visible: int = 1) -> str:
    """Mantém os `visible` primeiros caracteres de cada palavra alfanumérica e mascara o resto."""
    if len(mask_char) != 1:
        raise ValueError("mask_char deve ter exatamente um caractere")
    visible = visible if visible > 0 else 1

    def _mask(m: re.Match) -> str:
        word = m.group(0)
        if len(word) <= visible:
            return word
        return word[:visible] + mask_char * (len(word) - visible)

    return re.sub(r"[a-zA-Z0-9]+", _mask, text)

def truncate(text: str, max_length: int, ellipsis: str = "...") -> str:
    if max_length <= len(ellipsis):
        raise ValueError("max_length deve ser maior que o tamanho das reticências")
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis

def interpolate(template: str, *values) -> str:
    """
    Substitui {0}, {1}, ... pelos valores posicionais.
    interpolate("Olá {0}, você tem {1} anos", "Ana", 30) -> "Olá Ana, você tem 30 anos"
    """
    if not template:
        return ""
    if not values:
        return template
    indexes = [int(i) for i in re.findall(r"{(\d+)}", template)]
    if not indexes:
        raise ValueError("Nenhum placeholder encontrado no template")
    if max(indexes) >= len(values):
        raise ValueError("Índice de placeholder fora do intervalo")
    return re.sub(r"{(\d+)}", lambda m: str(values[int(m.group(1))]), template)

def to_bool(v) -> Optional[bool]:
    if v is None: return None
    if isinstance(v, bool): return v
    if is_numeric(v): return float(str(v).strip()) != 0
    s = normalize(str(v))
    if s in {"true","t","sim","s","yes","y"}: return True
    if s in {"false","f","nao","no","n"}: return False
    return None

def safe_int(v, default: Optional[int] = None) -> Optional[int]:
    try:
        if v is None or v == "": return default
        return int(float(str(v)))
    except (TypeError, ValueError, OverflowError):
        return default

def safe_float(v, default: Optional[float] = None) -> Optional[float]:
    try:
        if v is None or v == "": return default
        return float(str(v).replace(",", "."))
    except (TypeError, ValueError):
        return default
