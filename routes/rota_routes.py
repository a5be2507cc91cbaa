from fastapi import APIRouter, Depends, status

from dtos.campos import PaginacaoDTO
from dtos.rota_dto import AlterarRotaDTO, NovaRotaDTO
from repositories.rota_repo import RotaRepo
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404


router = APIRouter(prefix="/rotas", tags=["rotas"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_rotas(page: str = None, limite: str = None):
    query = PaginacaoDTO(page=page, limite=limite)
    return RotaRepo.obter_todos({}, query.page, query.limite)


@router.get("/{id}")
def obter_rota(id: str):
    return obter_ou_404(RotaRepo, id, "Rota")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_rota(rota: NovaRotaDTO):
    if RotaRepo.obter_por_rota_dominio(rota.rota, rota.dominio):
        raise conflito("Rota já cadastrada para este domínio.")
    return RotaRepo.inserir(rota.model_dump())


@router.patch("/{id}")
@router.put("/{id}")
def alterar_rota(id: str, rota: AlterarRotaDTO):
    obter_ou_404(RotaRepo, id, "Rota")
    return RotaRepo.alterar(id, rota.model_dump(exclude_none=True))


@router.delete("/{id}")
def excluir_rota(id: str):
    obter_ou_404(RotaRepo, id, "Rota")
    RotaRepo.excluir(id)
    return {"mensagem": "Rota excluída com sucesso"}
