from __future__ import annotations
import pytest

from helpers_br.utils.config import settings, set_settings, setting

def test_defaults():
    s = settings()
    assert s["HELPERS_LOCALE"] == "pt_BR"
    assert s["HELPERS_CURRENCY"] == "BRL"

def test_overrides_and_env_priority(monkeypatch):
    set_settings({"HELPERS_CURRENCY": "USD"})
    assert setting("HELPERS_CURRENCY") == "USD"
    monkeypatch.setenv("HELPERS_CURRENCY", "EUR")
    set_settings({})  # invalida o cache
    assert setting("HELPERS_CURRENCY") == "EUR"
    set_settings(None)
    monkeypatch.delenv("HELPERS_CURRENCY")
    set_settings({})
    assert setting("HELPERS_CURRENCY") == "BRL"

def test_unknown_key():
    with pytest.raises(KeyError, match="Chaves válidas"):
        setting("NAO_EXISTE")
