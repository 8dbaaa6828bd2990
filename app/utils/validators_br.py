from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

MSG_REQUIRED = "Required field"
MSG_BAD_LENGTH = "Enter a valid CPF (11 digits) or CNPJ (14 digits)"

CPF_LEN = 11
CNPJ_LEN = 14

# só 0-9: \D deixaria passar dígitos Unicode (ex.: "٣")
_NON_DIGIT = re.compile(r"[^0-9]")


class DocumentType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado de validate_document(): sempre devolvido, nunca levantado.
    `document_type` é None quando o tamanho não identifica CPF nem CNPJ.
    """
    valid: bool
    document_type: DocumentType | None
    message: str

    def __bool__(self) -> bool:
        return self.valid


def clean_document(value: str | None) -> str:
    return _NON_DIGIT.sub("", value or "")


def _all_same(n: str) -> bool:
    return n == n[0] * len(n)


def _apply_mask(n: str, sizes: tuple[int, ...], seps: str) -> str:
    """
    Insere os separadores à medida que os grupos se completam;
    o separador só entra quando já existe um dígito depois dele.
    """
    out, start = [], 0
    for size, sep in zip(sizes, seps):
        if len(n) <= start + size:
            break
        out.append(n[start:start + size] + sep)
        start += size
    out.append(n[start:])
    return "".join(out)

# ---------------- CPF ----------------

def _cpf_dv(n: str) -> int:
    top = len(n) + 1
    s = sum(int(d) * (top - i) for i, d in enumerate(n))
    r = 11 - (s % 11)
    return 0 if r >= 10 else r

def is_valid_cpf(cpf: str | None) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara.
    """
    n = clean_document(cpf)
    if len(n) != CPF_LEN or _all_same(n):
        return False

    # 1º DV (pesos 10..2), 2º DV (pesos 11..2)
    if _cpf_dv(n[:9]) != int(n[9]):
        return False
    return _cpf_dv(n[:10]) == int(n[10])

def format_cpf(cpf: str | None) -> str:
    """
    Máscara progressiva 000.000.000-00 (serve para digitação parcial).
    Com mais de 11 dígitos devolve a entrada original: provavelmente é CNPJ.
    """
    n = clean_document(cpf)
    if len(n) > CPF_LEN:
        return cpf or ""
    return _apply_mask(n, (3, 3, 3), "..-")

# ---------------- CNPJ ----------------

def _cnpj_dv(n: str) -> int:
    # peso começa em 2 no dígito mais à direita e volta a 2 depois do 9
    s, peso = 0, 2
    for d in reversed(n):
        s += int(d) * peso
        peso = 2 if peso == 9 else peso + 1
    r = s % 11
    return 0 if r < 2 else 11 - r

def is_valid_cnpj(cnpj: str | None) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    """
    n = clean_document(cnpj)
    if len(n) != CNPJ_LEN or _all_same(n):
        return False

    if _cnpj_dv(n[:12]) != int(n[12]):
        return False
    return _cnpj_dv(n[:13]) == int(n[13])

def format_cnpj(cnpj: str | None) -> str:
    """
    Máscara progressiva 00.000.000/0000-00.
    Dígitos além de 14 ficam no último grupo, com o hífen antes dos dois finais.
    """
    n = clean_document(cnpj)
    return _apply_mask(n, (2, 3, 3, max(4, len(n) - 10)), "../-")

# ---------------- CPF ou CNPJ ----------------

def format_document(value: str | None) -> str:
    """Ponto de entrada para formatar enquanto o usuário digita."""
    if len(clean_document(value)) <= CPF_LEN:
        return format_cpf(value)
    return format_cnpj(value)

def validate_document(value: str | None) -> ValidationResult:
    """
    Detecta o tipo pelo número de dígitos e valida.
    Nunca levanta exceção: todo erro vira ValidationResult(valid=False).
    """
    n = clean_document(value)
    if not n:
        return ValidationResult(False, None, MSG_REQUIRED)

    if len(n) == CPF_LEN:
        ok = is_valid_cpf(n)
        return ValidationResult(ok, DocumentType.CPF, "Valid CPF" if ok else "Invalid CPF")
    if len(n) == CNPJ_LEN:
        ok = is_valid_cnpj(n)
        return ValidationResult(ok, DocumentType.CNPJ, "Valid CNPJ" if ok else "Invalid CNPJ")

    return ValidationResult(False, None, MSG_BAD_LENGTH)
