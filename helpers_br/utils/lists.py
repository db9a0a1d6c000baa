from __future__ import annotations
import json
import re
import uuid
from functools import cmp_to_key
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, TypeVar

from .text import strip_accents

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_MISSING = object()

# ---------------- Ordenação ----------------

def _sort_text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple)):
        value = json.dumps(value, ensure_ascii=False, default=str)
    return strip_accents("" if value is None else str(value)).casefold()

def _get(item: Any, prop: str) -> Any:
    if isinstance(item, dict):
        return item.get(prop)
    return getattr(item, prop, None)

def sort_by(properties: str | Sequence[str]) -> Callable[[Any], Any]:
    """
    Chave de ordenação por uma ou mais propriedades; prefixo '-' inverte a ordem.
    sorted(pessoas, key=sort_by(["uf", "-nome"]))
    Os valores são comparados como texto, sem acento e sem caixa.
    """
    props = [properties] if isinstance(properties, str) else list(properties)

    def _cmp(a: Any, b: Any) -> int:
        for prop in props:
            order = 1
            if prop.startswith("-"):
                order, prop = -1, prop[1:]
            x, y = _sort_text(_get(a, prop)), _sort_text(_get(b, prop))
            if x != y:
                return order if x > y else -order
        return 0

    return cmp_to_key(_cmp)

def order_by(items: Iterable[T], key: str, order: str = "asc") -> List[T]:
    """Nova lista ordenada pelo valor bruto de `key` ('asc' ou 'desc')."""
    if order not in ("asc", "desc"):
        raise ValueError("order deve ser 'asc' ou 'desc'")
    return sorted(items, key=lambda it: _get(it, key), reverse=order == "desc")

def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, List[T]]:
    groups: Dict[K, List[T]] = {}
    for it in items:
        groups.setdefault(key_fn(it), []).append(it)
    return groups

def chunk(items: Sequence[T], size: int) -> List[Sequence[T]]:
    if size <= 0:
        raise ValueError("size deve ser maior que 0")
    return [items[i:i + size] for i in range(0, len(items), size)]

# ---------------- Caminhos aninhados ----------------

def _path_keys(path: str) -> List[str]:
    return re.findall(r"[^.\[\]]+", path or "")

def get_nested_value(obj: Any, path: str, default: Any = None) -> Any:
    """
    get_nested_value({"a": {"b": [10, 20]}}, "a.b.1") -> 20
    Caminho inexistente devolve `default`.
    """
    cur = obj
    for key in _path_keys(path):
        if isinstance(cur, dict):
            cur = cur.get(key, _MISSING)
        elif isinstance(cur, (list, tuple)) and key.lstrip("-").isdigit():
            idx = int(key)
            cur = cur[idx] if -len(cur) <= idx < len(cur) else _MISSING
        else:
            cur = getattr(cur, key, _MISSING)
        if cur is _MISSING:
            return default
    return cur

def set_nested_value(target: Dict[str, Any], path: str, value: Any) -> None:
    """
    Define valor em caminho 'a.b[0].c', criando dicts/listas intermediários.
    """
    if target is None:
        raise ValueError("target é obrigatório")
    if not path or not path.strip():
        raise ValueError("path é obrigatório")

    keys = _path_keys(path)
    cur: Any = target
    for i, raw in enumerate(keys):
        key: Any = int(raw) if raw.isdigit() else raw
        last = i == len(keys) - 1
        if not isinstance(cur, (dict, list)):
            raise ValueError(f"não é possível definir '{raw}' em '{path}': valor intermediário não é dict nem lista")
        if isinstance(cur, list):
            if not isinstance(key, int):
                raise ValueError(f"índice de lista inválido '{raw}' em '{path}'")
            while len(cur) <= key:
                cur.append(None)
        if last:
            cur[key] = value
            return
        nxt = keys[i + 1]
        exists = (key < len(cur) and cur[key] is not None) if isinstance(cur, list) else key in cur
        if not exists:
            cur[key] = [] if nxt.isdigit() else {}
        cur = cur[key]

# ---------------- Nulos ----------------

def if_null(value: Optional[T], fallback: T) -> T:
    return fallback if value is None else value

def if_null_or_empty(*values: Any) -> Any:
    """Primeiro valor que não seja None, string em branco ou coleção vazia."""
    for v in values:
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        if isinstance(v, (list, tuple, dict, set)) and not v:
            continue
        return v
    return None

def generate_uuid4() -> str:
    return str(uuid.uuid4())
