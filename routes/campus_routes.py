import logging

from fastapi import APIRouter, Depends, Request, status

from dtos.campus_dto import AlterarCampusDTO, CampusQueryDTO, NovoCampusDTO
from repositories.campus_repo import CampusRepo
from repositories.filtros.campus_filtro_builder import CampusFiltroBuilder
from repositories.usuario_repo import UsuarioRepo
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404, requisicao_invalida


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/campus", tags=["campus"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_campus(request: Request):
    query = CampusQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        CampusFiltroBuilder()
        .com_nome(query.nome)
        .com_cidade(query.cidade)
        .com_ativo(query.ativo)
        .build()
    )
    return CampusRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_campus(id: str):
    return obter_ou_404(CampusRepo, id, "Campus")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_campus(campus: NovoCampusDTO):
    if CampusRepo.obter_por_nome_cidade(campus.nome, campus.cidade):
        raise requisicao_invalida("Campus com este nome e cidade já existe.")
    novo = CampusRepo.inserir(campus.model_dump())
    logger.info("Campus %s criado", novo.id)
    return novo


@router.patch("/{id}")
@router.put("/{id}")
def alterar_campus(id: str, campus: AlterarCampusDTO):
    atual = obter_ou_404(CampusRepo, id, "Campus")
    dados = campus.model_dump(exclude_none=True)
    nome = dados.get("nome", atual.nome)
    cidade = dados.get("cidade", atual.cidade)
    if CampusRepo.obter_por_nome_cidade(nome, cidade, id_diferente=id):
        raise requisicao_invalida("Campus com este nome e cidade já existe.")
    return CampusRepo.alterar(id, dados)


@router.delete("/{id}")
def excluir_campus(id: str):
    obter_ou_404(CampusRepo, id, "Campus")
    if UsuarioRepo.existe({"campus": id}):
        raise conflito("Existem usuários associados a este campus.")
    CampusRepo.excluir(id)
    logger.info("Campus %s excluído", id)
    return {"mensagem": "Campus excluído com sucesso"}
