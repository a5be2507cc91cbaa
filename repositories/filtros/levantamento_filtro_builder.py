from dtos.levantamento_dto import ESTADOS
from repositories.filtros.filtro_builder import FiltroBuilder


class LevantamentoFiltroBuilder(FiltroBuilder):
    def com_inventario(self, inventario_id):
        return self._com_id("inventario", inventario_id)

    def com_usuario(self, usuario_id):
        return self._com_id("usuario", usuario_id)

    def com_sala(self, sala_id):
        return self._com_id("bem.sala_id", sala_id)

    def com_estado(self, estado):
        if estado in ESTADOS:
            self.filtros["estado"] = estado
        return self

    def com_ocioso(self, ocioso):
        return self._com_booleano("ocioso", ocioso)

    def com_tombo(self, tombo):
        return self._com_texto("bem.tombo", tombo)

    def com_nome_bem(self, nome):
        return self._com_texto("bem.nome", nome)
