"""Relatórios de levantamento em PDF.

Cada tipo de relatório é um filtro sobre os levantamentos do inventário;
o documento traz uma linha por levantamento.
"""

import io
from functools import lru_cache
from typing import Optional

from bson import ObjectId
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from repositories.levantamento_repo import LevantamentoRepo
from repositories.sala_repo import SalaRepo
from repositories.usuario_repo import UsuarioRepo


CABECALHO = ["Nome", "Tombo", "Estado", "Ocioso", "Sala Nova", "Usuário"]
SEM_RESULTADOS = "Nenhum levantamento encontrado para este filtro."

FILTROS_POR_TIPO = {
    "geral": {},
    "bens_danificados": {"estado": "Danificado"},
    "bens_inserviveis": {"estado": "Inservível"},
    "bens_ociosos": {"ocioso": True},
    "bens_nao_encontrados": {"imagem": None},
    "bens_sem_etiqueta": {"bem.tombo": {"$in": [None, ""]}},
}


def montar_filtro(inventario_id: str, tipo_relatorio: str, sala: Optional[str] = None) -> dict:
    if tipo_relatorio not in FILTROS_POR_TIPO:
        raise ValueError("Tipo de relatório inválido")
    filtro = {"inventario": ObjectId(inventario_id)}
    if sala:
        filtro["bem.sala_id"] = ObjectId(sala)
    filtro.update(FILTROS_POR_TIPO[tipo_relatorio])
    return filtro


def titulo_relatorio(tipo_relatorio: str) -> str:
    return "Relatório: " + tipo_relatorio.replace("_", " ")


class RelatorioService:
    @classmethod
    def montar_linhas(cls, inventario_id: str, tipo_relatorio: str, sala: Optional[str] = None) -> list:
        levantamentos = LevantamentoRepo.obter_lista(montar_filtro(inventario_id, tipo_relatorio, sala))

        @lru_cache(maxsize=None)
        def nome_sala(id):
            encontrada = SalaRepo.obter_por_id(id) if id else None
            return encontrada.nome if encontrada else "-"

        @lru_cache(maxsize=None)
        def nome_usuario(id):
            usuario = UsuarioRepo.obter_por_id(id) if id else None
            return usuario.nome if usuario else "-"

        linhas = []
        for levantamento in levantamentos:
            bem = levantamento.bem or {}
            linhas.append([
                bem.get("nome", ""),
                bem.get("tombo") or "Sem etiqueta",
                levantamento.estado,
                "Sim" if levantamento.ocioso else "Não",
                nome_sala(levantamento.sala_nova),
                nome_usuario(levantamento.usuario),
            ])
        return linhas

    @classmethod
    def gerar_pdf(cls, inventario_id: str, tipo_relatorio: str, sala: Optional[str] = None) -> bytes:
        linhas = cls.montar_linhas(inventario_id, tipo_relatorio, sala)
        estilos = getSampleStyleSheet()
        saida = io.BytesIO()
        documento = SimpleDocTemplate(
            saida,
            pagesize=landscape(A4),
            title=titulo_relatorio(tipo_relatorio),
            leftMargin=1.5 * cm,
            rightMargin=1.5 * cm,
        )
        elementos = [Paragraph(titulo_relatorio(tipo_relatorio), estilos["Title"]), Spacer(1, 0.5 * cm)]
        if not linhas:
            elementos.append(Paragraph(SEM_RESULTADOS, estilos["Normal"]))
        else:
            tabela = Table([CABECALHO] + linhas, repeatRows=1)
            tabela.setStyle(TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]))
            elementos.append(tabela)
        documento.build(elementos)
        return saida.getvalue()
