from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Optional

import pandas as pd

from helpers_br.utils.config import setting

# ----------------- logging -----------------
def get_logger(name: str = "batch", level: Optional[int] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    if level is None:
        level = logging.getLevelName(setting("HELPERS_LOG_LEVEL").upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger

# ----------------- io helpers -----------------
def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

def read_table(path: Path, sheet: int | str = 0) -> pd.DataFrame:
    """Lê CSV ou Excel como texto (preserva zeros à esquerda de CPF/CEP)."""
    if not path.exists():
        raise SystemExit(f"Arquivo não encontrado: {path}")
    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path, sheet_name=sheet, engine="openpyxl", dtype=str)
    else:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_table(df: pd.DataFrame, path: Path, sheet: str = "Sheet1") -> None:
    ensure_parent(path)
    if path.suffix.lower() == ".xlsx":
        with pd.ExcelWriter(path, engine="openpyxl") as xw:
            df.to_excel(xw, index=False, sheet_name=sheet)
    else:
        df.to_csv(path, index=False)

def require_column(df: pd.DataFrame, col: str) -> None:
    if col not in df.columns:
        raise SystemExit(f"Coluna '{col}' não encontrada. Encontrei: {list(df.columns)}")
