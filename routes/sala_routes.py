import logging

from fastapi import APIRouter, Depends, Request, status

from dtos.sala_dto import AlterarSalaDTO, NovaSalaDTO, SalaQueryDTO
from repositories.bem_repo import BemRepo
from repositories.campus_repo import CampusRepo
from repositories.filtros.sala_filtro_builder import SalaFiltroBuilder
from repositories.sala_repo import SalaRepo
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/salas", tags=["salas"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_salas(request: Request):
    query = SalaQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        SalaFiltroBuilder()
        .com_nome(query.nome)
        .com_bloco(query.bloco)
        .com_campus(query.campus)
        .build()
    )
    return SalaRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_sala(id: str):
    return obter_ou_404(SalaRepo, id, "Sala")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_sala(sala: NovaSalaDTO):
    obter_ou_404(CampusRepo, sala.campus, "Campus")
    nova = SalaRepo.inserir(sala.model_dump())
    logger.info("Sala %s criada no campus %s", nova.id, nova.campus)
    return nova


@router.patch("/{id}")
@router.put("/{id}")
def alterar_sala(id: str, sala: AlterarSalaDTO):
    obter_ou_404(SalaRepo, id, "Sala")
    if sala.campus:
        obter_ou_404(CampusRepo, sala.campus, "Campus")
    return SalaRepo.alterar(id, sala.model_dump(exclude_none=True))


@router.delete("/{id}")
def excluir_sala(id: str):
    obter_ou_404(SalaRepo, id, "Sala")
    if BemRepo.existe({"sala": id}):
        raise conflito("Existem bens associados a esta sala.")
    SalaRepo.excluir(id)
    logger.info("Sala %s excluída", id)
    return {"mensagem": "Sala excluída com sucesso"}
