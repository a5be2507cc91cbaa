from repositories.filtros.filtro_builder import FiltroBuilder


class BemFiltroBuilder(FiltroBuilder):
    def com_nome(self, nome):
        return self._com_texto("nome", nome)

    def com_tombo(self, tombo):
        return self._com_texto("tombo", tombo)

    def com_sala(self, sala_id):
        return self._com_id("sala", sala_id)

    def com_responsavel(self, responsavel):
        return self._com_texto("responsavel.nome", responsavel)

    def com_auditado(self, auditado):
        return self._com_booleano("auditado", auditado)
