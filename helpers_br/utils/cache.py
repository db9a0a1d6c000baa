from __future__ import annotations
import json
from functools import lru_cache, wraps
from threading import Lock
from typing import Any, Callable, Dict, TypeVar

T = TypeVar("T")

def _hashable(args: tuple, kwargs: dict) -> bool:
    try:
        hash((args, tuple(kwargs.items())))
        return True
    except TypeError:
        return False

def _json_key(args: tuple, kwargs: dict) -> str:
    return json.dumps([args, kwargs], sort_keys=True, default=repr)

def memoize(func: Callable[..., T] | None = None, *, maxsize: int | None = None):
    """
    Decorator de memoização. Aceita @memoize e @memoize(maxsize=...).
    Argumentos hasheáveis vão direto para lru_cache; os demais (listas, dicts)
    são serializados em JSON para formar a chave.
    A função decorada ganha .clear().
    """
    def _wrap(f: Callable[..., T]):
        hashed = lru_cache(maxsize=maxsize)(f)
        by_json: Dict[str, T] = {}
        lock = Lock()

        @wraps(f)
        def memoized(*args: Any, **kwargs: Any) -> T:
            if _hashable(args, kwargs):
                return hashed(*args, **kwargs)
            key = _json_key(args, kwargs)
            with lock:
                if key in by_json:
                    return by_json[key]
            result = f(*args, **kwargs)
            with lock:
                by_json[key] = result
            return result

        def clear() -> None:
            hashed.cache_clear()
            with lock:
                by_json.clear()

        memoized.clear = clear  # type: ignore[attr-defined]
        memoized.cache_info = hashed.cache_info  # type: ignore[attr-defined]
        return memoized

    return _wrap if func is None else _wrap(func)


class MemoryStore:
    """
    Armazenamento chave/valor em memória, compartilhado pelo processo.
    """
    _store: Dict[str, Any] = {}
    _lock = Lock()

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        with cls._lock:
            cls._store[key] = value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        return cls._store.get(key, default)

    @classmethod
    def remove(cls, key: str) -> None:
        with cls._lock:
            cls._store.pop(key, None)

    @classmethod
    def clear(cls) -> None:
        with cls._lock:
            cls._store = {}

    @classmethod
    def get_all(cls) -> Dict[str, Any]:
        return dict(cls._store)
