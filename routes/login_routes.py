import logging

from fastapi import APIRouter, HTTPException, status

from dtos.login_dto import LoginDTO, RefreshTokenDTO
from repositories.usuario_repo import UsuarioRepo
from util.auth import conferir_senha, criar_refresh_token, criar_token, renovar_tokens


logger = logging.getLogger(__name__)

router = APIRouter(tags=["login"])


@router.post("/login")
def login(login_dto: LoginDTO):
    encontrado = UsuarioRepo.obter_senha(login_dto.email)
    if encontrado is None or not conferir_senha(login_dto.senha, encontrado[1]):
        logger.warning("Falha de login para %s", login_dto.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Email ou senha inválidos")
    usuario = encontrado[0]
    if not usuario.status:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuário inativo")
    return {
        "access_token": criar_token(usuario.id, usuario.email),
        "refresh_token": criar_refresh_token(usuario.id, usuario.email),
        "usuario": usuario,
    }


@router.post("/refresh")
def refresh(refresh_dto: RefreshTokenDTO):
    return renovar_tokens(refresh_dto.refresh_token)
