from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from util.validators import is_in_list, is_not_empty, is_object_id


TIPOS_RELATORIO = [
    "geral",
    "bens_danificados",
    "bens_inserviveis",
    "bens_ociosos",
    "bens_nao_encontrados",
    "bens_sem_etiqueta",
]


class RelatorioQueryDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    inventario_id: str
    tipo_relatorio: str
    sala: Optional[str] = None

    @field_validator("inventario_id")
    def validar_inventario_id(cls, v):
        msg = is_not_empty(v, "inventario_id é obrigatório") or is_object_id(
            v, "inventario_id deve ser um ObjectId válido"
        )
        if msg: raise ValueError(msg)
        return v

    @field_validator("tipo_relatorio")
    def validar_tipo_relatorio(cls, v):
        msg = is_not_empty(v, "tipo_relatorio é obrigatório") or is_in_list(
            v,
            TIPOS_RELATORIO,
            "Tipo de relatório inválido. Valores aceitos: " + ", ".join(TIPOS_RELATORIO),
        )
        if msg: raise ValueError(msg)
        return v

    @field_validator("sala")
    def validar_sala(cls, v):
        msg = v and is_object_id(v, "sala deve ser um ObjectId válido")
        if msg: raise ValueError(msg)
        return v
