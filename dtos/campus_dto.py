from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import PaginacaoDTO, recusar_nulo
from util.validators import is_booleano_texto, is_not_empty, is_telefone


class NovoCampusDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nome: str
    cidade: str
    telefone: Optional[str] = None
    bairro: Optional[str] = None
    rua: Optional[str] = None
    numero_residencia: Optional[str] = None
    status: StrictBool = True

    @field_validator("nome", "cidade")
    def validar_obrigatorio(cls, v):
        msg = is_not_empty(v, "Este campo é obrigatório")
        if msg: raise ValueError(msg)
        return v

    @field_validator("telefone")
    def validar_telefone(cls, v):
        msg = is_telefone(v)
        if msg: raise ValueError(msg)
        return v

    @field_validator("status", mode="before")
    def validar_status(cls, v):
        return True if v is None else v


class AlterarCampusDTO(NovoCampusDTO):
    nome: Optional[str] = None
    cidade: Optional[str] = None

    @field_validator("nome", "cidade", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)


class CampusQueryDTO(PaginacaoDTO):
    nome: Optional[str] = None
    cidade: Optional[str] = None
    ativo: Optional[str] = None

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("cidade")
    def validar_cidade(cls, v):
        msg = is_not_empty(v, "Localidade não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("ativo")
    def validar_ativo(cls, v):
        msg = is_booleano_texto(v, "Ativo")
        if msg: raise ValueError(msg)
        return v
