import logging

from fastapi import APIRouter, Depends, Request, status

from dtos.bem_dto import AlterarBemDTO, BemQueryDTO, NovoBemDTO
from repositories.bem_repo import BemRepo
from repositories.filtros.bem_filtro_builder import BemFiltroBuilder
from repositories.levantamento_repo import LevantamentoRepo
from repositories.sala_repo import SalaRepo
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bens", tags=["bens"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_bens(request: Request):
    query = BemQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        BemFiltroBuilder()
        .com_nome(query.nome)
        .com_tombo(query.tombo)
        .com_sala(query.sala)
        .com_responsavel(query.responsavel)
        .com_auditado(query.auditado)
        .build()
    )
    return BemRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_bem(id: str):
    return obter_ou_404(BemRepo, id, "Bem")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_bem(bem: NovoBemDTO):
    obter_ou_404(SalaRepo, bem.sala, "Sala")
    if BemRepo.obter_por_tombo(bem.tombo):
        raise conflito("Já existe um bem com este tombo.")
    novo = BemRepo.inserir(bem.model_dump())
    logger.info("Bem %s (tombo %s) criado", novo.id, novo.tombo)
    return novo


@router.patch("/{id}")
@router.put("/{id}")
def alterar_bem(id: str, bem: AlterarBemDTO):
    atual = obter_ou_404(BemRepo, id, "Bem")
    if bem.sala:
        obter_ou_404(SalaRepo, bem.sala, "Sala")
    if bem.tombo and bem.tombo != atual.tombo and BemRepo.obter_por_tombo(bem.tombo):
        raise conflito("Já existe um bem com este tombo.")
    return BemRepo.alterar(id, bem.model_dump(exclude_none=True))


@router.delete("/{id}")
def excluir_bem(id: str):
    obter_ou_404(BemRepo, id, "Bem")
    if LevantamentoRepo.existe_bem(id):
        raise conflito("Existem levantamentos associados a este bem.")
    BemRepo.excluir(id)
    logger.info("Bem %s excluído", id)
    return {"mensagem": "Bem excluído com sucesso"}
