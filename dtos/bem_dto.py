from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import ObjectIdStr, PaginacaoDTO, recusar_nulo
from util.cpf_validator import limpar_cpf
from util.validators import is_booleano_texto, is_not_empty


class ResponsavelDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nome: str
    cpf: Optional[str] = None

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome do responsável é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("cpf")
    def validar_cpf(cls, v):
        return limpar_cpf(v) if v else v


class NovoBemDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    sala: ObjectIdStr
    nome: str
    tombo: str
    responsavel: ResponsavelDTO
    descricao: Optional[str] = None
    valor: float
    auditado: StrictBool = False
    ocioso: StrictBool = False

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Campo nome é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("tombo")
    def validar_tombo(cls, v):
        msg = is_not_empty(v, "Campo tombo é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("valor")
    def validar_valor(cls, v):
        if v is not None and v < 0:
            raise ValueError("Valor deve ser maior ou igual a 0")
        return v


class AlterarBemDTO(NovoBemDTO):
    sala: Optional[ObjectIdStr] = None
    nome: Optional[str] = None
    tombo: Optional[str] = None
    responsavel: Optional[ResponsavelDTO] = None
    valor: Optional[float] = None
    auditado: Optional[StrictBool] = None
    ocioso: Optional[StrictBool] = None

    @field_validator("sala", "nome", "tombo", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)

    @field_validator("responsavel", mode="before")
    def recusar_responsavel_nulo(cls, v):
        return recusar_nulo(v, "object")

    @field_validator("valor", mode="before")
    def recusar_valor_nulo(cls, v):
        return recusar_nulo(v, "number")

    @field_validator("auditado", "ocioso", mode="before")
    def recusar_booleanos_nulos(cls, v):
        return recusar_nulo(v, "boolean")


class BemQueryDTO(PaginacaoDTO):
    nome: Optional[str] = None
    tombo: Optional[str] = None
    sala: Optional[str] = None
    responsavel: Optional[str] = None
    auditado: Optional[str] = None

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Nome não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("tombo")
    def validar_tombo(cls, v):
        msg = is_not_empty(v, "Tombo não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("sala")
    def validar_sala(cls, v):
        msg = is_not_empty(v, "Sala não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("responsavel")
    def validar_responsavel(cls, v):
        msg = is_not_empty(v, "Responsável não pode ser vazio")
        if msg: raise ValueError(msg)
        return v

    @field_validator("auditado")
    def validar_auditado(cls, v):
        msg = is_booleano_texto(v, "Auditado")
        if msg: raise ValueError(msg)
        return v
