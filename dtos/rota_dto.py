from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import recusar_nulo
from util.validators import is_not_empty


class NovaRotaDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    rota: str
    dominio: str
    ativo: StrictBool = True
    buscar: StrictBool = False
    enviar: StrictBool = False
    substituir: StrictBool = False
    modificar: StrictBool = False
    excluir: StrictBool = False

    @field_validator("rota")
    def validar_rota(cls, v):
        msg = is_not_empty(v, "Campo rota é obrigatório.")
        if msg: raise ValueError(msg)
        return v.lower() if v else v

    @field_validator("dominio")
    def validar_dominio(cls, v):
        msg = is_not_empty(v, "Campo domínio é obrigatório.")
        if msg: raise ValueError(msg)
        return v


class AlterarRotaDTO(NovaRotaDTO):
    rota: Optional[str] = None
    dominio: Optional[str] = None
    ativo: Optional[StrictBool] = None
    buscar: Optional[StrictBool] = None
    enviar: Optional[StrictBool] = None
    substituir: Optional[StrictBool] = None
    modificar: Optional[StrictBool] = None
    excluir: Optional[StrictBool] = None

    @field_validator("rota", "dominio", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)

    @field_validator("ativo", "buscar", "enviar", "substituir", "modificar", "excluir", mode="before")
    def recusar_flags_nulas(cls, v):
        return recusar_nulo(v, "boolean")
