from models.inventario_model import Inventario
from repositories.base_repo import BaseRepo


class InventarioRepo(BaseRepo):
    colecao = "inventarios"
    modelo = Inventario
    campos_ids = ("campus",)
