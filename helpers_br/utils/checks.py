from __future__ import annotations
import inspect
import json
import re
from datetime import date
from typing import Any, Set, Tuple
from urllib.parse import urlparse

_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)
_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I)

# ---------------- Igualdade profunda ----------------

def equals(left: Any, right: Any, ignore_order: bool = False) -> bool:
    """
    Compara estruturas recursivamente (dict, list/tuple, set, datetime, regex).
    Com ignore_order=True, listas são comparadas como multiconjuntos.
    Referências cíclicas são toleradas.
    """
    # pares (id(a), id(b)) em comparação; reencontrar um deles significa ciclo
    in_progress: Set[Tuple[int, int]] = set()

    def _eq(a: Any, b: Any) -> bool:
        if a is b:
            return True
        if type(a) is not type(b):
            # int x float continuam comparáveis (1 == 1.0)
            if isinstance(a, (int, float)) and isinstance(b, (int, float)) and not isinstance(a, bool) and not isinstance(b, bool):
                return a == b
            return False
        if isinstance(a, date):
            return a == b
        if isinstance(a, re.Pattern):
            return a.pattern == b.pattern and a.flags == b.flags
        if isinstance(a, (set, frozenset)):
            return a == b
        if not isinstance(a, (dict, list, tuple)):
            return a == b

        pair = (id(a), id(b))
        if pair in in_progress:
            return True
        in_progress.add(pair)
        try:
            return _eq_containers(a, b)
        finally:
            in_progress.discard(pair)

    def _eq_containers(a: Any, b: Any) -> bool:
        if isinstance(a, dict):
            if a.keys() != b.keys():
                return False
            return all(_eq(a[k], b[k]) for k in a)

        if len(a) != len(b):
            return False
        if ignore_order:
            rest = list(b)
            for av in a:
                idx = next((i for i, bv in enumerate(rest) if _eq(av, bv)), -1)
                if idx == -1:
                    return False
                rest.pop(idx)
            return True
        return all(_eq(av, bv) for av, bv in zip(a, b))

    return _eq(left, right)

# ---------------- Predicados ----------------

def null_or_empty(value: Any) -> bool:
    """None, False, 0, '' (ou só espaços), coleções vazias."""
    if isinstance(value, str):
        return value.strip() == ""
    return not value

def is_object(value: Any) -> bool:
    return isinstance(value, dict)

def is_function(value: Any) -> bool:
    return callable(value)

def is_awaitable(value: Any) -> bool:
    return inspect.isawaitable(value)

def is_email(value: str) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    if ".." in value or "@" not in value or len(value) > 254:
        return False
    local, _, domain = value.partition("@")
    # RFC 5321: parte local com no máximo 64 caracteres
    if not local or len(local) > 64:
        return False
    if not domain or "." not in domain:
        return False
    for part in domain.split("."):
        if not part or part.startswith("-") or part.endswith("-"):
            return False
    return bool(_EMAIL_RE.match(value))

def is_uuid(value: str) -> bool:
    return isinstance(value, str) and bool(_UUID_RE.match(value))

def is_url(value: str) -> bool:
    if not isinstance(value, str):
        return False
    try:
        u = urlparse(value.strip())
    except ValueError:
        return False
    return u.scheme in ("http", "https") and bool(u.netloc)

def is_json(value: str) -> bool:
    if not isinstance(value, str):
        return False
    try:
        json.loads(value)
        return True
    except ValueError:
        return False
