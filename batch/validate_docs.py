# batch/validate_docs.py
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Tuple

import pandas as pd

from batch.common import get_logger, read_table, write_table, require_column
from helpers_br.utils.validators_br import is_valid_cpf, is_valid_cnpj, format_cpf, format_cnpj

log = get_logger("validate_docs")

def classify(doc) -> Tuple[str, bool, str]:
    """(tipo, valido, formatado) para um CPF ou CNPJ, com ou sem máscara."""
    s = "" if doc is None or (isinstance(doc, float) and pd.isna(doc)) else str(doc).strip()
    if is_valid_cpf(s):
        return "cpf", True, format_cpf(s)
    if is_valid_cnpj(s):
        return "cnpj", True, format_cnpj(s)
    return "invalido", False, s

def validate_column(df: pd.DataFrame, col: str) -> pd.DataFrame:
    require_column(df, col)
    out = df.copy()
    res = out[col].map(classify)
    out["tipo"] = res.map(lambda r: r[0])
    out["valido"] = res.map(lambda r: r[1])
    out["formatado"] = res.map(lambda r: r[2])
    return out

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Valida e formata uma coluna de CPF/CNPJ.")
    ap.add_argument("--src", required=True)
    ap.add_argument("--col", required=True)
    ap.add_argument("--sheet", default=0)
    ap.add_argument("--out", required=True)
    args = ap.parse_args(argv)

    df = read_table(Path(args.src), sheet=args.sheet)
    out = validate_column(df, args.col)
    write_table(out, Path(args.out))

    resumo = out["tipo"].value_counts().to_dict()
    log.info(f"{len(out)} documentos: {resumo}")
    invalidos = int((~out["valido"]).sum())
    if invalidos:
        log.warning(f"{invalidos} documento(s) inválido(s)")

if __name__ == "__main__":
    main()
