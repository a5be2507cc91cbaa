import logging
import os
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi import HTTPException, Request, status

from repositories.rota_repo import RotaRepo
from services.permissao_service import PermissaoService


logger = logging.getLogger(__name__)

JWT_SECRET = os.getenv("JWT_SECRET", "troque-este-segredo")
JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET", JWT_SECRET + "-refresh")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRA_MINUTOS = int(os.getenv("JWT_EXPIRA_MINUTOS", "15"))
JWT_REFRESH_EXPIRA_DIAS = int(os.getenv("JWT_REFRESH_EXPIRA_DIAS", "7"))

METODOS_PERMISSAO = {
    "GET": "buscar",
    "POST": "enviar",
    "PUT": "substituir",
    "PATCH": "modificar",
    "DELETE": "excluir",
}


def obter_hash_senha(senha: str) -> str:
    try:
        hashed = bcrypt.hashpw(senha.encode(), bcrypt.gensalt())
        return hashed.decode()
    except ValueError:
        return ""


def conferir_senha(senha: str, hash_senha: str) -> bool:
    try:
        return bcrypt.checkpw(senha.encode(), hash_senha.encode())
    except ValueError:
        return False


def _payload(id: str, email: str, duracao: timedelta) -> dict:
    agora = datetime.now(timezone.utc)
    return {"id": id, "email": email, "iat": agora, "exp": agora + duracao}


def criar_token(id: str, email: str) -> str:
    payload = _payload(id, email, timedelta(minutes=JWT_EXPIRA_MINUTOS))
    return jwt.encode(payload, JWT_SECRET, JWT_ALGORITHM)


def criar_refresh_token(id: str, email: str) -> str:
    payload = _payload(id, email, timedelta(days=JWT_REFRESH_EXPIRA_DIAS))
    return jwt.encode(payload, JWT_REFRESH_SECRET, JWT_ALGORITHM)


def validar_token(token: str, segredo: str = None) -> dict:
    try:
        return jwt.decode(token, segredo or JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return {"mensagem": "Token expirado"}
    except jwt.InvalidTokenError:
        return {"mensagem": "Token inválido"}


def renovar_tokens(refresh_token: str) -> dict:
    dados = validar_token(refresh_token, JWT_REFRESH_SECRET)
    if "mensagem" in dados:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=dados["mensagem"])
    # limita a sessão total mesmo com tokens sendo renovados
    inicio = datetime.fromtimestamp(dados["iat"], timezone.utc)
    if datetime.now(timezone.utc) - inicio > timedelta(days=JWT_REFRESH_EXPIRA_DIAS):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sessão expirada, faça login novamente",
        )
    return {
        "access_token": criar_token(dados["id"], dados["email"]),
        "refresh_token": criar_refresh_token(dados["id"], dados["email"]),
    }


async def obter_usuario_logado(request: Request) -> dict:
    cabecalho = request.headers.get("Authorization", "")
    esquema, _, token = cabecalho.partition(" ")
    if esquema != "Bearer" or not token.strip():
        return None
    dados = validar_token(token.strip())
    if "mensagem" in dados:
        logger.warning("Token rejeitado em %s: %s", request.url.path, dados["mensagem"])
        return None
    return dados


async def checar_autenticacao(request: Request, call_next):
    usuario = await obter_usuario_logado(request)
    request.state.usuario = usuario
    response = await call_next(request)
    return response


def checar_autorizacao(request: Request):
    usuario = request.state.usuario if hasattr(request.state, "usuario") else None
    if not usuario:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token ou usuário não autenticado")
    metodo = METODOS_PERMISSAO.get(request.method)
    if not metodo:
        raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
    segmentos = [parte for parte in request.url.path.split("/") if parte]
    rota = segmentos[0].lower() if segmentos else ""
    dominio = request.url.hostname or "localhost"
    rota_db = RotaRepo.obter_por_rota_dominio(rota, dominio)
    if rota_db is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rota não encontrada")
    if not rota_db.ativo:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Rota inativa")
    if not PermissaoService.tem_permissao(usuario["id"], rota_db, metodo):
        logger.warning("Permissão negada: usuario=%s rota=%s metodo=%s", usuario["id"], rota, metodo)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Permissão negada")


def configurar_swagger_auth(app):
    app.openapi_schema = app.openapi()
    app.openapi_schema["components"]["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    }
    app.openapi_schema["security"] = [{"BearerAuth": []}]
