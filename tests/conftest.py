from __future__ import annotations
from pathlib import Path
import pytest
import pandas as pd

from helpers_br.utils import config
from helpers_br.utils.cache import MemoryStore

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def tmpdir_path(tmp_path: Path) -> Path:
    return tmp_path

@pytest.fixture
def valores_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"id": "1", "valor": "1001"},
        {"id": "2", "valor": "1.234.567"},
        {"id": "3", "valor": "0"},
        {"id": "4", "valor": "12,50"},
        {"id": "5", "valor": ""},
        {"id": "6", "valor": "1000000000000000000"},
    ])

@pytest.fixture
def docs_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Ana", "documento": "529.982.247-25"},
        {"nome": "Coop", "documento": "11222333000181"},
        {"nome": "Erro", "documento": "123.456.789-00"},
    ])

@pytest.fixture
def tmp_valores_csv(tmpdir_path: Path, valores_df) -> Path:
    out = tmpdir_path / "valores.csv"
    valores_df.to_csv(out, index=False)
    return out

@pytest.fixture
def tmp_docs_xlsx(tmpdir_path: Path, docs_df) -> Path:
    out = tmpdir_path / "docs.xlsx"
    with pd.ExcelWriter(out, engine="openpyxl") as xw:
        docs_df.to_excel(xw, index=False, sheet_name="docs")
    return out

# ---------- ISOLAMENTO DE ESTADO GLOBAL ----------

@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """
    Garante defaults previsíveis: remove variáveis HELPERS_* do ambiente e
    limpa overrides/cache de settings() antes e depois de cada teste.
    """
    for key in list(config._DEFAULTS):
        monkeypatch.delenv(key, raising=False)
    config.set_settings(None)
    yield
    config.set_settings(None)

@pytest.fixture(autouse=True)
def clear_memory_store():
    MemoryStore.clear()
    yield
    MemoryStore.clear()
