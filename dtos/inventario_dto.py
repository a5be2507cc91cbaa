from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import ObjectIdStr, PaginacaoDTO, recusar_nulo
from util.validators import converter_data, is_booleano_texto, is_not_empty


class NovoInventarioDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    campus: ObjectIdStr
    nome: str
    data: datetime
    status: StrictBool = True

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Campo nome é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("data", mode="before")
    def validar_data(cls, v):
        if v is None:
            return v
        return converter_data(v)

    @field_validator("status", mode="before")
    def validar_status(cls, v):
        return True if v is None else v


class AlterarInventarioDTO(NovoInventarioDTO):
    campus: Optional[ObjectIdStr] = None
    nome: Optional[str] = None
    data: Optional[datetime] = None

    @field_validator("campus", "nome", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)

    @field_validator("data", mode="before")
    def recusar_data_nula(cls, v):
        return recusar_nulo(v, "date")


class InventarioQueryDTO(PaginacaoDTO):
    nome: Optional[str] = None
    ativo: Optional[str] = None
    data: Optional[str] = None
    campus: Optional[str] = None

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("ativo")
    def validar_ativo(cls, v):
        msg = is_booleano_texto(v, "Ativo")
        if msg: raise ValueError(msg)
        return v

    @field_validator("data")
    def validar_data(cls, v):
        msg = is_not_empty(v, "Data não pode ser vazia")
        if msg: raise ValueError(msg)
        return v

    @field_validator("campus")
    def validar_campus(cls, v):
        msg = is_not_empty(v, "Campus não pode ser vazio")
        if msg: raise ValueError(msg)
        return v
