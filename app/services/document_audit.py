from __future__ import annotations
from typing import Any, Dict

import pandas as pd

from app.utils.validators_br import clean_document, format_document, validate_document

AUDIT_COLUMNS = ["documento_limpo", "documento_formatado", "tipo_documento", "documento_valido", "mensagem"]

def _as_text(v: Any) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    # coluna numérica com NaN vira float: 11144477735.0 -> "11144477735"
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return str(v)

def audit_documents(df: pd.DataFrame, column: str = "cpf_cnpj") -> pd.DataFrame:
    """
    Valida a coluna de CPF/CNPJ de um DataFrame (ex.: perfis exportados).
    Retorna uma cópia com as colunas de AUDIT_COLUMNS; o df original não é alterado.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {', '.join(map(str, df.columns))}")

    out = df.copy()
    raw = out[column].map(_as_text)
    results = raw.map(validate_document)

    out["documento_limpo"] = raw.map(clean_document)
    out["documento_formatado"] = raw.map(format_document)
    out["tipo_documento"] = results.map(lambda r: r.document_type.value if r.document_type else None)
    out["documento_valido"] = results.map(lambda r: r.valid).astype(bool)
    out["mensagem"] = results.map(lambda r: r.message)
    return out

def summarize_audit(audited: pd.DataFrame) -> Dict[str, int]:
    """Contagens para log/relatório a partir da saída de audit_documents()."""
    if audited is None or audited.empty:
        return {"total": 0, "validos": 0, "invalidos": 0, "cpf": 0, "cnpj": 0, "indeterminados": 0}

    valid = audited["documento_valido"].astype(bool)
    tipo = audited["tipo_documento"]
    return {
        "total": int(len(audited)),
        "validos": int(valid.sum()),
        "invalidos": int((~valid).sum()),
        "cpf": int((tipo == "CPF").sum()),
        "cnpj": int((tipo == "CNPJ").sum()),
        "indeterminados": int(tipo.isna().sum()),
    }
