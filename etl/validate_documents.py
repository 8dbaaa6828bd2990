# etl/validate_documents.py
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Sequence

from app.services.document_audit import audit_documents, summarize_audit
from app.utils.config import path
from etl.common import LOG_LEVELS, get_logger, read_table, resolve_path, write_csv

def _sheet(value: str) -> int | str:
    # "1" é índice da aba; qualquer outro texto é o nome dela
    return int(value) if value.isdigit() else value

def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Valida CPF/CNPJ de uma tabela de perfis")
    ap.add_argument("--src", default=None, help="CSV/XLSX de entrada (default: PROFILES_SRC)")
    ap.add_argument("--out", default=None, help="CSV de saída (default: DOCUMENTS_REPORT)")
    ap.add_argument("--column", default="cpf_cnpj", help="coluna com o documento")
    ap.add_argument("--sheet", type=_sheet, default=0, help="aba do XLSX (índice ou nome)")
    ap.add_argument("--strict", action="store_true", help="sai com código 1 se houver documento inválido")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return ap.parse_args(argv)

def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    log = get_logger("validate_documents", args.log_level)

    src = resolve_path(args.src or path("PROFILES_SRC"))
    out = resolve_path(args.out or path("DOCUMENTS_REPORT"))

    if not src.exists():
        log.error(f"Faltando: {src}")
        raise SystemExit(1)

    try:
        df = read_table(src, sheet=args.sheet)
    except ValueError as e:
        # aba inexistente (pandas) ou planilha ilegível
        log.error(f"Falha ao ler {src.name}: {e}")
        raise SystemExit(1)
    log.info(f"{len(df)} linhas lidas de {src.name}")

    try:
        audited = audit_documents(df, column=args.column)
    except KeyError as e:
        log.error(e.args[0])
        raise SystemExit(1)

    stats = summarize_audit(audited)
    log.info(
        f"CPF: {stats['cpf']} | CNPJ: {stats['cnpj']} | indeterminados: {stats['indeterminados']} | "
        f"válidos: {stats['validos']}/{stats['total']}"
    )
    for idx, row in audited[~audited["documento_valido"]].iterrows():
        log.debug(f"linha {idx}: '{row[args.column]}' -> {row['mensagem']}")

    write_csv(audited, out)
    log.info(f"✅ relatório salvo em {out}")

    if args.strict and stats["invalidos"]:
        log.error(f"{stats['invalidos']} documento(s) inválido(s)")
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
