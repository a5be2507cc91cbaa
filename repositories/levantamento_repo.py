from models.levantamento_model import Levantamento
from repositories.base_repo import BaseRepo
from util.db import converter_ids, documento_para_modelo, para_object_id


class LevantamentoRepo(BaseRepo):
    colecao = "levantamentos"
    modelo = Levantamento
    campos_ids = ("inventario", "sala_nova", "usuario", "bem.id", "bem.sala_id")
    ordem = "criado_em"

    @classmethod
    def _preparar(cls, dados: dict) -> dict:
        preparado = super()._preparar(dados)
        if isinstance(preparado.get("bem"), dict):
            preparado["bem"] = converter_ids(preparado["bem"], ("id", "sala_id"))
        return preparado

    @classmethod
    def obter_por_inventario_bem(cls, inventario_id: str, bem_id: str):
        return cls.obter_um({"inventario": inventario_id, "bem.id": bem_id})

    @classmethod
    def obter_lista(cls, filtros: dict) -> list:
        documentos = cls._colecao().find(filtros).sort("criado_em", 1)
        return [documento_para_modelo(cls.modelo, documento) for documento in documentos]

    @classmethod
    def existe_bem(cls, bem_id: str) -> bool:
        return cls._colecao().count_documents({"bem.id": para_object_id(bem_id)}, limit=1) > 0
