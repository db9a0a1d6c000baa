# batch/extenso_column.py
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Optional

import pandas as pd

from batch.common import get_logger, read_table, write_table, require_column
from helpers_br.extenso import OutOfRangeError, convert_to_words
from helpers_br.utils.text import only_numbers

log = get_logger("extenso")

def cell_to_words(raw) -> Optional[str]:
    """
    Converte uma célula ('1.234', '1234', 1234) por extenso.
    Células vazias, não inteiras ou fora do intervalo viram None.
    """
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return None
    s = str(raw).strip()
    if not s:
        return None
    # aceita separador de milhar (1.234.567), rejeita decimais e sinais
    if not all(ch.isdigit() or ch in ". " for ch in s):
        log.warning(f"valor não inteiro ignorado: {s!r}")
        return None
    digits = only_numbers(s)
    if not digits:
        return None
    try:
        return convert_to_words(int(digits))
    except OutOfRangeError as e:
        log.warning(f"{s}: {e}")
        return None

def add_words_column(df: pd.DataFrame, col: str, out_col: str | None = None) -> pd.DataFrame:
    require_column(df, col)
    out = df.copy()
    out[out_col or f"{col}_extenso"] = out[col].map(cell_to_words)
    return out

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Adiciona coluna com o valor por extenso.")
    ap.add_argument("--src", required=True, help="CSV ou XLSX de entrada")
    ap.add_argument("--col", required=True, help="coluna com os valores inteiros")
    ap.add_argument("--out-col", default=None, help="nome da nova coluna (default: <col>_extenso)")
    ap.add_argument("--sheet", default=0, help="aba do Excel (default: primeira)")
    ap.add_argument("--out", required=True)
    args = ap.parse_args(argv)

    df = read_table(Path(args.src), sheet=args.sheet)
    if df.empty:
        raise SystemExit("Tabela de entrada vazia.")

    out = add_words_column(df, args.col, args.out_col)
    new_col = args.out_col or f"{args.col}_extenso"
    falhas = int(out[new_col].isna().sum())
    write_table(out, Path(args.out))
    log.info(f"{len(out)} linhas salvas em {args.out} ({falhas} sem conversão)")

if __name__ == "__main__":
    main()
