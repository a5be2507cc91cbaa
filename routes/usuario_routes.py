import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from dtos.usuario_dto import AlterarUsuarioDTO, NovaSenhaDTO, NovoUsuarioDTO, UsuarioQueryDTO
from repositories.campus_repo import CampusRepo
from repositories.filtros.usuario_filtro_builder import UsuarioFiltroBuilder
from repositories.usuario_repo import UsuarioRepo
from util.auth import checar_autorizacao, obter_hash_senha
from util.http import conflito, obter_ou_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/usuarios", tags=["usuarios"], dependencies=[Depends(checar_autorizacao)])


def _checar_unicidade(dados: dict, id: str = None):
    if "email" in dados and UsuarioRepo.existe_conflito("email", dados["email"], id):
        raise conflito("Email já cadastrado.")
    if "cpf" in dados and UsuarioRepo.existe_conflito("cpf", dados["cpf"], id):
        raise conflito("CPF já cadastrado.")


@router.get("")
def listar_usuarios(request: Request):
    query = UsuarioQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        UsuarioFiltroBuilder()
        .com_nome(query.nome)
        .com_ativo(query.ativo)
        .com_campus(query.campus)
        .build()
    )
    return UsuarioRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_usuario(id: str):
    return obter_ou_404(UsuarioRepo, id, "Usuário")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_usuario(usuario: NovoUsuarioDTO):
    obter_ou_404(CampusRepo, usuario.campus, "Campus")
    dados = usuario.model_dump(exclude_none=True)
    _checar_unicidade(dados)
    if "senha" in dados:
        dados["senha"] = obter_hash_senha(dados["senha"])
    novo = UsuarioRepo.inserir(dados)
    logger.info("Usuário %s criado", novo.id)
    return novo


@router.patch("/{id}")
@router.put("/{id}")
def alterar_usuario(id: str, usuario: AlterarUsuarioDTO):
    obter_ou_404(UsuarioRepo, id, "Usuário")
    dados = usuario.model_dump(exclude_none=True)
    if "campus" in dados:
        obter_ou_404(CampusRepo, dados["campus"], "Campus")
    _checar_unicidade(dados, id)
    if "senha" in dados:
        dados["senha"] = obter_hash_senha(dados["senha"])
    return UsuarioRepo.alterar(id, dados)


@router.patch("/{id}/senha")
def alterar_senha(id: str, nova_senha: NovaSenhaDTO, request: Request):
    obter_ou_404(UsuarioRepo, id, "Usuário")
    if request.state.usuario["id"] != id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Só é possível alterar a própria senha")
    UsuarioRepo.alterar(id, {"senha": obter_hash_senha(nova_senha.senha)})
    return {"mensagem": "Senha alterada com sucesso"}


@router.delete("/{id}")
def excluir_usuario(id: str):
    obter_ou_404(UsuarioRepo, id, "Usuário")
    UsuarioRepo.excluir(id)
    logger.info("Usuário %s excluído", id)
    return {"mensagem": "Usuário excluído com sucesso"}
