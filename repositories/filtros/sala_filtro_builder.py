from repositories.filtros.filtro_builder import FiltroBuilder


class SalaFiltroBuilder(FiltroBuilder):
    def com_nome(self, nome):
        return self._com_texto("nome", nome)

    def com_bloco(self, bloco):
        return self._com_texto("bloco", bloco)

    def com_campus(self, campus_id):
        return self._com_id("campus", campus_id)
