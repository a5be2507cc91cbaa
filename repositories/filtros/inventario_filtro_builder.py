import re
from datetime import datetime, timedelta, timezone

from repositories.filtros.filtro_builder import FiltroBuilder


class InventarioFiltroBuilder(FiltroBuilder):
    def com_nome(self, nome):
        return self._com_texto("nome", nome)

    def com_ativo(self, ativo):
        return self._com_booleano("status", ativo)

    def com_campus(self, campus_id):
        return self._com_id("campus", campus_id)

    def com_data(self, data):
        """Filtra pelo dia inteiro (UTC) de uma data dd/mm/aaaa ou aaaa-mm-dd."""
        if not isinstance(data, str) or not data.strip():
            return self
        texto = data.strip()
        if re.match(r"^\d{2}/\d{2}/\d{4}$", texto):
            formato = "%d/%m/%Y"
        elif re.match(r"^\d{4}-\d{2}-\d{2}$", texto):
            formato = "%Y-%m-%d"
        else:
            return self
        try:
            inicio = datetime.strptime(texto, formato).replace(tzinfo=timezone.utc)
        except ValueError:
            return self
        fim = inicio + timedelta(days=1) - timedelta(milliseconds=1)
        self.filtros["data"] = {"$gte": inicio, "$lte": fim}
        return self
