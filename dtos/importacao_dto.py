import os
from typing import Optional

from pydantic import BaseModel, StrictInt, field_validator

from util.validators import is_in_list


TAMANHO_MAXIMO_MB = int(os.getenv("MAX_UPLOAD_MB", "60"))
TAMANHO_MAXIMO_CSV = TAMANHO_MAXIMO_MB * 1024 * 1024
TIPOS_CSV = ["text/csv", "application/csv", "application/vnd.ms-excel"]


class ArquivoCsvDTO(BaseModel):
    """Metadados do arquivo enviado para importação de bens."""

    campo: Optional[str] = None
    nome_arquivo: Optional[str] = None
    codificacao: Optional[str] = None
    tipo_conteudo: str
    conteudo: bytes
    tamanho: StrictInt

    @field_validator("nome_arquivo")
    def validar_nome_arquivo(cls, v):
        if v and not v.lower().endswith(".csv"):
            raise ValueError("O arquivo deve ter a extensão .csv")
        return v

    @field_validator("tipo_conteudo")
    def validar_tipo_conteudo(cls, v):
        msg = is_in_list(
            v,
            TIPOS_CSV,
            "O arquivo enviado não é um CSV válido. Por favor, envie um arquivo com tipo válido como text/csv.",
        )
        if msg: raise ValueError(msg)
        return v

    @field_validator("conteudo", mode="before")
    def validar_conteudo(cls, v):
        if not isinstance(v, (bytes, bytearray)):
            raise ValueError("O buffer do arquivo é inválido.")
        if len(v) == 0:
            raise ValueError("O arquivo CSV não pode estar vazio.")
        return bytes(v)

    @field_validator("tamanho")
    def validar_tamanho(cls, v):
        if v <= 0:
            raise ValueError("O tamanho do arquivo deve ser maior que zero.")
        if v > TAMANHO_MAXIMO_CSV:
            raise ValueError(f"O arquivo não pode ser maior que {TAMANHO_MAXIMO_MB}MB.")
        return v
