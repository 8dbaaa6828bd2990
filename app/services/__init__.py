from .document_audit import AUDIT_COLUMNS, audit_documents, summarize_audit

__all__ = [
    "AUDIT_COLUMNS",
    "audit_documents",
    "summarize_audit",
]
