from pydantic import BaseModel, ConfigDict, field_validator

from util.validators import is_email, is_not_empty


class LoginDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str
    senha: str

    @field_validator("email")
    def validar_email(cls, v):
        msg = is_not_empty(v, "Campo email é obrigatório.") or is_email(v)
        if msg: raise ValueError(msg)
        return v

    @field_validator("senha")
    def validar_senha(cls, v):
        msg = is_not_empty(v, "Campo senha é obrigatório.")
        if msg: raise ValueError(msg)
        return v


class RefreshTokenDTO(BaseModel):
    refresh_token: str
