from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Entrada do lote (CSV ou XLSX com a coluna cpf_cnpj)
    "PROFILES_SRC": "data/raw/perfis.csv",
    # Relatório gerado por etl.validate_documents
    "DOCUMENTS_REPORT": "data/processed/documentos_validados.csv",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

def _coerce(p: str) -> str:
    # normaliza separador e expande ~ e vars
    return str(Path(os.path.expandvars(os.path.expanduser(p))))

@lru_cache(maxsize=1)
def paths() -> Dict[str, str]:
    """
    Retorna um dicionário de paths:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. PROFILES_SRC)
    - overrides definidos via set_paths()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(env_val)
        elif k in _runtime_overrides:
            merged[k] = _coerce(_runtime_overrides[k])
        else:
            merged[k] = _coerce(default)
    return dict(merged)

def set_paths(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de paths().
    """
    _runtime_overrides.update({k: _coerce(v) for k, v in (overrides or {}).items()})
    paths.cache_clear()  # type: ignore[attr-defined]

def reset_paths() -> None:
    """Descarta os overrides de set_paths()."""
    _runtime_overrides.clear()
    paths.cache_clear()  # type: ignore[attr-defined]

def path(key: str) -> str:
    """Atalho: paths()[key] com KeyError amigável."""
    p = paths()
    if key not in p:
        raise KeyError(f"Path '{key}' não configurado. Chaves válidas: {', '.join(sorted(p.keys()))}")
    return p[key]
