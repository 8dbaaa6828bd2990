from .config import paths, set_paths, reset_paths, path
from .validators_br import (
    DocumentType, ValidationResult,
    clean_document, format_cpf, format_cnpj, format_document,
    is_valid_cpf, is_valid_cnpj, validate_document,
)

__all__ = [
    "paths", "set_paths", "reset_paths", "path",
    "DocumentType", "ValidationResult",
    "clean_document", "format_cpf", "format_cnpj", "format_document",
    "is_valid_cpf", "is_valid_cnpj", "validate_document",
]
