from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import ObjectIdStr, PaginacaoDTO, recusar_nulo
from util.validators import is_booleano_texto, is_in_list, is_not_empty, is_object_id, is_url


ESTADOS = ["Em condições de uso", "Inservível", "Danificado"]
MENSAGEM_ESTADO = 'O estado deve ser "Em condições de uso", "Inservível" ou "Danificado".'


class NovoLevantamentoDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    inventario: ObjectIdStr
    bem_id: ObjectIdStr
    sala_nova: Optional[ObjectIdStr] = None
    imagem: Optional[str] = None
    estado: str
    ocioso: StrictBool = False

    @field_validator("imagem")
    def validar_imagem(cls, v):
        msg = is_url(v, "A URL da imagem é inválida.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("estado")
    def validar_estado(cls, v):
        if v is None:
            return v
        msg = is_in_list(v, ESTADOS, MENSAGEM_ESTADO)
        if msg: raise ValueError(msg)
        return v


class AlterarLevantamentoDTO(NovoLevantamentoDTO):
    inventario: Optional[ObjectIdStr] = None
    bem_id: Optional[ObjectIdStr] = None
    estado: Optional[str] = None
    ocioso: Optional[StrictBool] = None

    @field_validator("inventario", "bem_id", "estado", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)

    @field_validator("ocioso", mode="before")
    def recusar_ocioso_nulo(cls, v):
        return recusar_nulo(v, "boolean")


class LevantamentoQueryDTO(PaginacaoDTO):
    MENSAGEM_PAGE: ClassVar[str] = "O parâmetro 'page' deve ser um número inteiro maior que 0."
    MENSAGEM_LIMITE: ClassVar[str] = "O parâmetro 'limite' deve ser um número inteiro entre 1 e 100."

    tombo: Optional[str] = None
    nome: Optional[str] = None
    sala: Optional[str] = None
    inventario: Optional[str] = None
    usuario: Optional[str] = None
    estado: Optional[str] = None
    ocioso: Optional[str] = None

    @field_validator("tombo")
    def validar_tombo(cls, v):
        msg = is_not_empty(v, "O tombo não pode ser vazio.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("sala")
    def validar_sala(cls, v):
        msg = v is not None and is_object_id(v, "O ID da sala é inválido.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("inventario")
    def validar_inventario(cls, v):
        msg = v is not None and is_object_id(v, "O ID do inventário é inválido.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("usuario")
    def validar_usuario(cls, v):
        msg = v is not None and is_object_id(v, "O ID do usuário é inválido.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("estado")
    def validar_estado(cls, v):
        msg = v is not None and is_in_list(v, ESTADOS, MENSAGEM_ESTADO)
        if msg: raise ValueError(msg)
        return v

    @field_validator("ocioso")
    def validar_ocioso(cls, v):
        if is_booleano_texto(v, "ocioso"):
            raise ValueError("O valor para 'ocioso' deve ser 'true' ou 'false'.")
        return v
