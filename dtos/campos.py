from typing import Annotated, ClassVar

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from util.validators import converter_inteiro, is_object_id


def _validar_object_id(v: str) -> str:
    msg = is_object_id(v)
    if msg: raise ValueError(msg)
    return v


ObjectIdStr = Annotated[str, AfterValidator(_validar_object_id)]

_object_id_adapter = TypeAdapter(ObjectIdStr)


def validar_id(valor) -> str:
    """Valida um identificador avulso (parâmetro de rota)."""
    return _object_id_adapter.validate_python(valor)


class PaginacaoDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    MENSAGEM_PAGE: ClassVar[str] = "Page deve ser um número inteiro maior que 0"
    MENSAGEM_LIMITE: ClassVar[str] = "Limite deve ser um número inteiro entre 1 e 100"

    page: int = 1
    limite: int = Field(10, validation_alias=AliasChoices("limite", "limit"))

    @field_validator("page", mode="before")
    def validar_page(cls, v):
        pagina = converter_inteiro(v, 1)
        if pagina is None or pagina <= 0:
            raise ValueError(cls.MENSAGEM_PAGE)
        return pagina

    @field_validator("limite", mode="before")
    def validar_limite(cls, v):
        limite = converter_inteiro(v, 10)
        if limite is None or not 1 <= limite <= 100:
            raise ValueError(cls.MENSAGEM_LIMITE)
        return limite


def recusar_nulo(valor, tipo: str = "string"):
    """Nas variantes de alteração o campo pode faltar, mas não pode vir null."""
    if valor is None:
        raise ValueError(f"Expected {tipo}, received null")
    return valor
