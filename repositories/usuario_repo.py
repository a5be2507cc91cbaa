from typing import Optional

from bson import ObjectId

from models.usuario_model import Usuario
from repositories.base_repo import BaseRepo


class UsuarioRepo(BaseRepo):
    colecao = "usuarios"
    modelo = Usuario
    campos_ids = ("campus",)

    @classmethod
    def obter_senha(cls, email: str) -> Optional[tuple]:
        """Devolve (usuario, hash_senha) para o login."""
        documento = cls._colecao().find_one({"email": email})
        if documento is None:
            return None
        return cls.obter_por_id(str(documento["_id"])), documento.get("senha", "")

    @classmethod
    def existe_conflito(cls, campo: str, valor: str, id_diferente: Optional[str] = None) -> bool:
        filtros = {campo: valor}
        if id_diferente:
            filtros["_id"] = {"$ne": ObjectId(id_diferente)}
        return cls.existe(filtros)
