from __future__ import annotations
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.utils.validators_br import DocumentType, format_document, validate_document


class UserType(str, Enum):
    """Tipo de conta: freelancer (pessoa física) ou empresa contratante."""
    FREELANCER = "freelancer"
    COMPANY = "company"

    @property
    def expected_document(self) -> DocumentType:
        return DocumentType.CPF if self is UserType.FREELANCER else DocumentType.CNPJ

    @property
    def document_label(self) -> str:
        return self.expected_document.value


class UserProfile(BaseModel):
    """
    Dados enviados pelo formulário de edição de perfil.
    - `cpf_cnpj` é validado (dígitos verificadores) e guardado já formatado.
    - Textos vazios viram None.
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    user_type: UserType = Field(default=UserType.FREELANCER)
    name: str | None = Field(default=None)
    phone: str | None = Field(default=None, max_length=20)
    cpf_cnpj: str | None = Field(default=None, max_length=18, description="CPF (freelancer) ou CNPJ (empresa)")
    bio: str | None = Field(default=None)
    experience: str | None = Field(default=None)
    area: str | None = Field(default=None, max_length=100, description="Área de atuação (garçom, cozinheiro, bartender...)")
    location: str | None = Field(default=None, max_length=200)

    @field_validator("name", "phone", "bio", "experience", "area", "location", mode="before")
    @classmethod
    def _strip(cls, v: Any):
        if v is None:
            return v
        s = str(v).strip()
        return s or None

    @field_validator("cpf_cnpj", mode="before")
    @classmethod
    def _check_document(cls, v: Any):
        if v is None or not str(v).strip():
            return None
        result = validate_document(str(v))
        if not result.valid:
            raise ValueError(result.message)
        return format_document(str(v))

    # ---------------- Conveniências ----------------

    @property
    def document_type(self) -> DocumentType | None:
        if not self.cpf_cnpj:
            return None
        return validate_document(self.cpf_cnpj).document_type

    def document_matches_user_type(self) -> bool:
        """True sem documento, ou quando CPF/CNPJ bate com o tipo de conta."""
        dt = self.document_type
        return dt is None or dt == self.user_type.expected_document

    def as_dict(self) -> dict[str, Any]:
        """Dicionário serializável (enums como string)."""
        return self.model_dump(mode="json")
