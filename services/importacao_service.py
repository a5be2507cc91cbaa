"""Importação em lote de bens a partir da exportação CSV do SIADS.

Cada linha de dados começa com ``D¥¥``; o conteúdo útil vai até o ``£`` e
os campos são separados por ``¥``.
"""

import logging
import re
from dataclasses import dataclass, field

from pymongo.errors import BulkWriteError

from repositories.bem_repo import BemRepo
from repositories.sala_repo import SalaRepo


logger = logging.getLogger(__name__)

PREFIXO_LINHA = "D¥¥"
SEPARADOR = "¥"
TERMINADOR = "£"
MINIMO_CAMPOS = 25
RESPONSAVEL_PADRAO = "Responsável não informado"
SALA_PADRAO = "Não Localizado"
BLOCO_PADRAO = "Não Especificado"

MOTIVO_DUPLICADO = "Tombos duplicados"
MOTIVO_FALHA_BANCO = "Falhas de inserção no banco"


@dataclass
class RegistroCsv:
    linha: int
    descricao: str
    localizacao: str
    valor: str
    tombo: str
    cpf_responsavel: str
    nome_responsavel: str


@dataclass
class ResumoImportacao:
    total_processados: int = 0
    total_inseridos: int = 0
    total_ignorados: int = 0
    erros: list = field(default_factory=list)
    motivos: dict = field(default_factory=lambda: {MOTIVO_DUPLICADO: 0, MOTIVO_FALHA_BANCO: 0})

    @property
    def total_erros(self) -> int:
        return len(self.erros)

    def para_dict(self) -> dict:
        return {
            "total_processados": self.total_processados,
            "total_inseridos": self.total_inseridos,
            "total_ignorados": self.total_ignorados,
            "total_erros": self.total_erros,
            "erros": self.erros,
            "motivos": self.motivos,
        }


def extrair_sala(localizacao: str) -> tuple:
    """'Laboratório 1 (Bloco A)' -> ('Laboratório 1', 'Bloco A')."""
    if not localizacao:
        return SALA_PADRAO, BLOCO_PADRAO
    correspondencia = re.match(r"(.*)\s+\(([^)]+)\)$", localizacao)
    if correspondencia:
        return correspondencia.group(1).strip(), correspondencia.group(2).strip()
    return localizacao, BLOCO_PADRAO


def ler_csv(conteudo: bytes) -> list:
    texto = conteudo.decode("utf-8", errors="replace")
    linhas = [linha for linha in texto.splitlines() if linha.strip().startswith(PREFIXO_LINHA)]
    registros = []
    for indice, linha in enumerate(linhas, start=1):
        campos = linha.split(TERMINADOR)[0].split(SEPARADOR)
        if len(campos) < MINIMO_CAMPOS:
            continue
        registros.append(RegistroCsv(
            linha=indice,
            descricao=campos[2],
            localizacao=campos[4],
            valor=campos[10] or "0",
            tombo=campos[15],
            cpf_responsavel=campos[-7],
            nome_responsavel=campos[-6] or RESPONSAVEL_PADRAO,
        ))
    return registros


def _valor_em_reais(valor: str) -> float:
    try:
        return float(valor) / 100.0
    except ValueError:
        return 0.0


def _nome_responsavel(nome: str) -> str:
    nome = nome.strip()
    if not nome or nome == "FALSE":
        return RESPONSAVEL_PADRAO
    return nome


class ImportacaoService:
    @classmethod
    def importar_csv(cls, conteudo: bytes, campus_id: str) -> ResumoImportacao:
        registros = ler_csv(conteudo)
        resumo = ResumoImportacao(total_processados=len(registros))
        if not registros:
            return resumo

        salas = {}
        tombos_existentes = BemRepo.tombos_existentes([r.tombo for r in registros if r.tombo])
        bens = []
        for registro in registros:
            if registro.tombo and registro.tombo in tombos_existentes:
                resumo.motivos[MOTIVO_DUPLICADO] += 1
                continue
            chave = extrair_sala(registro.localizacao)
            if chave not in salas:
                sala = SalaRepo.obter_por_nome_bloco(chave[0], chave[1], campus_id)
                if sala is None:
                    sala = SalaRepo.inserir({"nome": chave[0], "bloco": chave[1], "campus": campus_id})
                salas[chave] = sala
            bens.append({
                "sala": salas[chave].id,
                "nome": registro.descricao.split(".")[0] or "Item sem descrição",
                "tombo": registro.tombo,
                "responsavel": {
                    "nome": _nome_responsavel(registro.nome_responsavel),
                    "cpf": registro.cpf_responsavel.strip(),
                },
                "descricao": registro.descricao,
                "valor": _valor_em_reais(registro.valor),
                "ocioso": "BENS RECOLHIDOS" in registro.localizacao.upper(),
                "auditado": False,
            })

        if bens:
            try:
                resumo.total_inseridos = BemRepo.inserir_varios(bens)
            except BulkWriteError as erro:
                detalhes = erro.details
                resumo.total_inseridos = detalhes.get("nInserted", 0)
                falhas = detalhes.get("writeErrors", [])
                resumo.motivos[MOTIVO_FALHA_BANCO] = len(falhas)
                for falha in falhas:
                    tombo = falha.get("op", {}).get("tombo")
                    resumo.erros.append({
                        "tipo": "Erro de Inserção no Banco",
                        "mensagem": f"Falha ao inserir bem (Tombo: {tombo}). Motivo: {falha.get('errmsg')}",
                    })

        resumo.total_ignorados = sum(resumo.motivos.values())
        for motivo, quantidade in resumo.motivos.items():
            if quantidade:
                logger.info("%d registros pulados por: %s", quantidade, motivo)
        logger.info(
            "Importação concluída: %d processados, %d inseridos",
            resumo.total_processados,
            resumo.total_inseridos,
        )
        return resumo
