# etl/__init__.py
"""ETL package for Freelancer Now.

Use como módulos (recomendado):
    python -m etl.validate_documents --src data/raw/perfis.csv
"""
__all__ = []
