from repositories.filtros.filtro_builder import FiltroBuilder


class UsuarioFiltroBuilder(FiltroBuilder):
    def com_nome(self, nome):
        return self._com_texto("nome", nome)

    def com_ativo(self, ativo):
        return self._com_booleano("status", ativo)

    def com_campus(self, campus_id):
        return self._com_id("campus", campus_id)
