from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from dtos.campos import ObjectIdStr, PaginacaoDTO, recusar_nulo
from util.validators import is_not_empty


class NovaSalaDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    campus: ObjectIdStr
    nome: str
    bloco: str

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Campo nome é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("bloco")
    def validar_bloco(cls, v):
        msg = is_not_empty(v, "Campo bloco é obrigatório.")
        if msg: raise ValueError(msg)
        return v


class AlterarSalaDTO(NovaSalaDTO):
    campus: Optional[ObjectIdStr] = None
    nome: Optional[str] = None
    bloco: Optional[str] = None

    @field_validator("campus", "nome", "bloco", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)


class SalaQueryDTO(PaginacaoDTO):
    nome: Optional[str] = None
    campus: Optional[str] = None
    bloco: Optional[str] = None

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("campus")
    def validar_campus(cls, v):
        msg = is_not_empty(v, "Campus não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("bloco")
    def validar_bloco(cls, v):
        msg = is_not_empty(v, "Bloco não pode ser vazio")
        if msg: raise ValueError(msg)
        return v
