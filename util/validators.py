import re
from datetime import datetime, timezone
from typing import Optional

from util.cpf_validator import is_valid_cpf


REGEX_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")
REGEX_TELEFONE = re.compile(r"^(\d{10,11}|\(\d{2}\)\s?\d{4,5}-?\d{4})$")
REGEX_EMAIL = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$")
REGEX_DATA = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
REGEX_INTEIRO = re.compile(r"^\s*([+-]?\d+)")
REGEX_URL = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)

# 1 minúscula, 1 maiúscula, 1 número e 1 caractere especial
REGEX_SENHA_FORTE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$")
# 1 minúscula, 1 maiúscula e 1 número
REGEX_SENHA = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[A-Za-z\d@$!%*?&]{8,}$")


def is_not_empty(valor: Optional[str], mensagem: str) -> Optional[str]:
    if valor is not None and valor.strip() == "":
        return mensagem
    return None


def is_object_id(valor: Optional[str], mensagem: str = "ID inválido") -> Optional[str]:
    if valor is None or not REGEX_OBJECT_ID.match(valor):
        return mensagem
    return None


def is_telefone(valor: Optional[str]) -> Optional[str]:
    if valor and not REGEX_TELEFONE.match(valor):
        return "Telefone inválido. Use formato (XX) XXXXX-XXXX ou apenas números"
    return None


def is_email(valor: str) -> Optional[str]:
    if not REGEX_EMAIL.match(valor):
        return "Formato de email inválido."
    return None


def is_url(valor: Optional[str], mensagem: str) -> Optional[str]:
    if valor is not None and not REGEX_URL.match(valor):
        return mensagem
    return None


def is_senha_forte(valor: Optional[str]) -> Optional[str]:
    if valor is not None and not REGEX_SENHA_FORTE.match(valor):
        return (
            "A senha deve ter pelo menos 8 caracteres, com 1 letra maiúscula, "
            "1 minúscula, 1 número e 1 caractere especial."
        )
    return None


def is_senha(valor: str) -> Optional[str]:
    if not REGEX_SENHA.match(valor):
        return (
            "A senha deve conter pelo menos 1 letra maiúscula, 1 letra minúscula, "
            "1 número e no mínimo 8 caracteres."
        )
    return None


def is_cpf(valor: str) -> Optional[str]:
    if not re.match(r"^\d{11}$", valor):
        return "CPF deve conter 11 dígitos numéricos."
    if not is_valid_cpf(valor):
        return "CPF inválido (dígitos verificadores não conferem)."
    return None


def is_in_list(valor, lista, mensagem: str) -> Optional[str]:
    if valor not in lista:
        return mensagem
    return None


def is_booleano_texto(valor: Optional[str], nome_campo: str) -> Optional[str]:
    if valor is not None and valor not in ("true", "false"):
        return f"{nome_campo} deve ser 'true' ou 'false'"
    return None


def converter_inteiro(valor, padrao: int) -> Optional[int]:
    """Converte um parâmetro de query em inteiro como o parseInt do navegador.

    Ausente ou vazio devolve o padrão, "2.5" vira 2 e texto sem dígitos
    iniciais devolve None.
    """
    if valor is None or valor == "":
        return padrao
    if isinstance(valor, bool):
        return None
    if isinstance(valor, int):
        return valor
    if isinstance(valor, float):
        return int(valor) if valor == valor else None
    correspondencia = REGEX_INTEIRO.match(str(valor))
    if not correspondencia:
        return None
    return int(correspondencia.group(1))


def converter_data(valor) -> datetime:
    """Converte dd/mm/aaaa em meia-noite UTC; datetime já convertido passa direto."""
    if isinstance(valor, datetime):
        return valor
    if not isinstance(valor, str):
        raise ValueError("Data deve estar no formato dd/mm/aaaa")
    correspondencia = REGEX_DATA.match(valor.strip())
    if not correspondencia:
        raise ValueError("Data deve estar no formato dd/mm/aaaa")
    dia, mes, ano = (int(parte) for parte in correspondencia.groups())
    try:
        return datetime(ano, mes, dia, tzinfo=timezone.utc)
    except ValueError:
        raise ValueError("Por favor, insira uma data válida no formato dd/mm/aaaa")
