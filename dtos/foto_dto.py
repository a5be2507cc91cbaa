import os
from typing import Optional

from pydantic import BaseModel, StrictInt, field_validator

from util.validators import is_in_list


TAMANHO_MAXIMO_FOTO_MB = int(os.getenv("MAX_FOTO_MB", "10"))
TAMANHO_MAXIMO_FOTO = TAMANHO_MAXIMO_FOTO_MB * 1024 * 1024
EXTENSOES_POR_TIPO = {"image/jpeg": "jpg", "image/png": "png", "image/webp": "webp"}


class FotoDTO(BaseModel):
    """Imagem enviada como comprovação de um levantamento."""

    nome_arquivo: Optional[str] = None
    tipo_conteudo: str
    conteudo: bytes
    tamanho: StrictInt

    @field_validator("tipo_conteudo")
    def validar_tipo_conteudo(cls, v):
        msg = is_in_list(v, list(EXTENSOES_POR_TIPO), "A foto deve ser uma imagem JPEG, PNG ou WEBP.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("conteudo", mode="before")
    def validar_conteudo(cls, v):
        if not isinstance(v, (bytes, bytearray)):
            raise ValueError("O buffer do arquivo é inválido.")
        if len(v) == 0:
            raise ValueError("A foto não pode estar vazia.")
        return bytes(v)

    @field_validator("tamanho")
    def validar_tamanho(cls, v):
        if v > TAMANHO_MAXIMO_FOTO:
            raise ValueError(f"A foto não pode ser maior que {TAMANHO_MAXIMO_FOTO_MB}MB.")
        return v

    @property
    def extensao(self) -> str:
        return EXTENSOES_POR_TIPO[self.tipo_conteudo]
