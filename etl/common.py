from __future__ import annotations
import logging, os, sys
from pathlib import Path

import pandas as pd

# ----------------- logging -----------------
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def get_logger(name: str = "etl", level: int | str | None = None) -> logging.Logger:
    """
    Logger com um único StreamHandler em stdout.
    Nível: argumento > env LOG_LEVEL > INFO.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.strip().upper()
    if level not in LOG_LEVELS and not isinstance(level, int):
        logger.setLevel(logging.INFO)
        logger.warning(f"Nível de log desconhecido: {level!r}; usando INFO")
        return logger
    logger.setLevel(level)
    return logger

# ----------------- paths -----------------
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]

def resolve_path(p: str | Path) -> Path:
    """Relativos são resolvidos a partir da raiz do projeto."""
    p = Path(p)
    return p if p.is_absolute() else project_root() / p

def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

# ----------------- io helpers -----------------
def read_table(path: Path, sheet: int | str = 0) -> pd.DataFrame:
    """
    Lê CSV ou XLSX sempre como texto: CPF/CNPJ perdem zeros à esquerda se virarem número.
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif suffix in (".xlsx", ".xlsm"):
        df = pd.read_excel(path, sheet_name=sheet, dtype=str, engine="openpyxl").fillna("")
    else:
        raise SystemExit(f"Formato não suportado: {path.suffix} (use .csv ou .xlsx)")
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_csv(df: pd.DataFrame, path: Path) -> None:
    ensure_parent(path)
    df.to_csv(path, index=False, encoding="utf-8")
