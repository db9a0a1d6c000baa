from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Formatação
    "HELPERS_LOCALE": "pt_BR",
    "HELPERS_CURRENCY": "BRL",
    # Documentos (CNPJ alfanumérico passa a valer nesta data)
    "HELPERS_CNPJ_ALFA_DESDE": "2026-07-01",
    # Logs dos scripts em batch/
    "HELPERS_LOG_LEVEL": "INFO",
    # Hash de senha
    "HELPERS_PBKDF2_ITER": "130000",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

def _coerce(v) -> str:
    return str(v).strip()

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. HELPERS_LOCALE)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(env_val)
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, str] | None) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Passar None limpa todos os overrides. Invalida o cache de settings().
    """
    if overrides is None:
        _runtime_overrides.clear()
    else:
        _runtime_overrides.update({k: _coerce(v) for k, v in overrides.items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' não existe. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]
