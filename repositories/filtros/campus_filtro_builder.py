from repositories.filtros.filtro_builder import FiltroBuilder


class CampusFiltroBuilder(FiltroBuilder):
    def com_nome(self, nome):
        return self._com_texto("nome", nome)

    def com_cidade(self, cidade):
        return self._com_texto("cidade", cidade)

    def com_ativo(self, ativo):
        return self._com_booleano("status", ativo)
