from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from dtos.campos import ObjectIdStr, PaginacaoDTO, recusar_nulo
from util.cpf_validator import limpar_cpf
from util.validators import (
    is_booleano_texto,
    is_cpf,
    is_email,
    is_in_list,
    is_not_empty,
    is_senha,
    is_senha_forte,
)


CARGOS = ["Comissionado", "Funcionario Cpalm"]


class NovoUsuarioDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    campus: ObjectIdStr
    nome: str
    cpf: str
    email: str
    senha: Optional[str] = None
    cargo: str
    status: StrictBool = True

    @field_validator("nome")
    def validar_nome(cls, v):
        msg = is_not_empty(v, "Campo nome é obrigatório.")
        if msg: raise ValueError(msg)
        return v

    @field_validator("cpf", mode="before")
    def limpar_pontuacao_cpf(cls, v):
        if isinstance(v, str):
            return limpar_cpf(v.strip())
        return v

    @field_validator("cpf")
    def validar_cpf(cls, v):
        if v is None:
            return v
        msg = is_not_empty(v, "Campo CPF é obrigatório.") or is_cpf(v)
        if msg: raise ValueError(msg)
        return v

    @field_validator("email")
    def validar_email(cls, v):
        if v is None:
            return v
        msg = is_not_empty(v, "Campo email é obrigatório.") or is_email(v)
        if msg: raise ValueError(msg)
        return v

    @field_validator("senha")
    def validar_senha(cls, v):
        msg = is_senha_forte(v)
        if msg: raise ValueError(msg)
        return v

    @field_validator("cargo")
    def validar_cargo(cls, v):
        if v is None:
            return v
        msg = is_in_list(v, CARGOS, 'O cargo deve ser "Comissionado" ou "Funcionario Cpalm".')
        if msg: raise ValueError(msg)
        return v

    @field_validator("status", mode="before")
    def validar_status(cls, v):
        return True if v is None else v


class AlterarUsuarioDTO(NovoUsuarioDTO):
    campus: Optional[ObjectIdStr] = None
    nome: Optional[str] = None
    cpf: Optional[str] = None
    email: Optional[str] = None
    cargo: Optional[str] = None

    @field_validator("campus", "nome", "cpf", "email", "cargo", mode="before")
    def recusar_nulos(cls, v):
        return recusar_nulo(v)


class NovaSenhaDTO(BaseModel):
    senha: str

    @field_validator("senha")
    def validar_senha(cls, v):
        msg = is_senha(v)
        if msg: raise ValueError(msg)
        return v


class UsuarioQueryDTO(PaginacaoDTO):
    nome: Optional[str] = None
    ativo: Optional[str] = None
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

    @field_validator("campus")
    def validar_campus(cls, v):
        msg = is_not_empty(v, "campus não pode ser vazio")
        if msg: raise ValueError(msg)
        return v
