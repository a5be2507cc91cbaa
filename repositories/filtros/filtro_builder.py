import re

from bson import ObjectId

from util.validators import REGEX_OBJECT_ID


REGEX_ESPECIAIS = re.compile(r"[-[\]{}()*+?.,\\^$|#\s]")


def escapar_regex(texto: str) -> str:
    """Escapa os metacaracteres de regex (e espaços) de um texto do usuário."""
    return REGEX_ESPECIAIS.sub(lambda m: "\\" + m.group(0), texto)


class FiltroBuilder:
    """Acumula predicados opcionais em um filtro de consulta do MongoDB.

    Cada método com_* devolve a própria instância; build() devolve o
    dicionário acumulado, vazio quando nada foi adicionado.
    """

    def __init__(self):
        self.filtros = {}

    def _com_texto(self, campo: str, valor):
        if not isinstance(valor, str) or not valor.strip():
            return self
        texto = valor.strip()
        escapado = escapar_regex(texto)
        if len(texto) == 1:
            self.filtros[campo] = {"$regex": f"^{escapado}", "$options": "i"}
        else:
            self.filtros[campo] = {"$regex": escapado, "$options": "i"}
        return self

    def _com_booleano(self, campo: str, valor):
        if valor == "true" or valor is True:
            self.filtros[campo] = True
        elif valor == "false" or valor is False:
            self.filtros[campo] = False
        return self

    def _com_id(self, campo: str, valor):
        if isinstance(valor, str) and REGEX_OBJECT_ID.match(valor):
            self.filtros[campo] = ObjectId(valor)
        return self

    def build(self) -> dict:
        return self.filtros
