import logging

from fastapi import APIRouter, Depends, Request, status

from dtos.inventario_dto import AlterarInventarioDTO, InventarioQueryDTO, NovoInventarioDTO
from repositories.campus_repo import CampusRepo
from repositories.filtros.inventario_filtro_builder import InventarioFiltroBuilder
from repositories.inventario_repo import InventarioRepo
from repositories.levantamento_repo import LevantamentoRepo
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventarios", tags=["inventarios"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_inventarios(request: Request):
    query = InventarioQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        InventarioFiltroBuilder()
        .com_nome(query.nome)
        .com_ativo(query.ativo)
        .com_campus(query.campus)
        .com_data(query.data)
        .build()
    )
    return InventarioRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_inventario(id: str):
    return obter_ou_404(InventarioRepo, id, "Inventário")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_inventario(inventario: NovoInventarioDTO):
    obter_ou_404(CampusRepo, inventario.campus, "Campus")
    novo = InventarioRepo.inserir(inventario.model_dump())
    logger.info("Inventário %s criado", novo.id)
    return novo


@router.patch("/{id}")
@router.put("/{id}")
def alterar_inventario(id: str, inventario: AlterarInventarioDTO):
    obter_ou_404(InventarioRepo, id, "Inventário")
    if inventario.campus:
        obter_ou_404(CampusRepo, inventario.campus, "Campus")
    return InventarioRepo.alterar(id, inventario.model_dump(exclude_none=True))


@router.delete("/{id}")
def excluir_inventario(id: str):
    obter_ou_404(InventarioRepo, id, "Inventário")
    if LevantamentoRepo.existe({"inventario": id}):
        raise conflito("Existem levantamentos associados a este inventário.")
    InventarioRepo.excluir(id)
    logger.info("Inventário %s excluído", id)
    return {"mensagem": "Inventário excluído com sucesso"}
