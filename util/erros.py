import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError


logger = logging.getLogger(__name__)

NOMES_TIPOS = {
    type(None): "null",
    bool: "boolean",
    int: "number",
    float: "number",
    str: "string",
    list: "array",
    dict: "object",
}


TIPOS_ESPERADOS = {
    "string_type": "string",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "int_type": "number",
    "int_parsing": "number",
    "float_type": "number",
    "float_parsing": "number",
    "bytes_type": "bytes",
    "model_type": "object",
    "dict_type": "object",
    "datetime_type": "date",
}


def _nome_tipo(valor) -> str:
    return NOMES_TIPOS.get(type(valor), type(valor).__name__)


def traduzir_mensagem(erro: dict) -> str:
    tipo = erro.get("type", "")
    if tipo == "missing":
        return "Required"
    if tipo == "value_error":
        return str(erro.get("ctx", {}).get("error", erro.get("msg")))
    if tipo == "extra_forbidden":
        return f"Unrecognized key(s) in object: '{erro['loc'][-1]}'"
    if tipo in TIPOS_ESPERADOS:
        return f"Expected {TIPOS_ESPERADOS[tipo]}, received {_nome_tipo(erro.get('input'))}"
    return erro.get("msg", "Invalid input")


def _caminho(loc) -> str:
    # loc de RequestValidationError começa com "body"/"query"/"path"
    partes = [str(parte) for parte in loc if parte not in ("body", "query", "path")]
    return ".".join(partes)


def listar_erros(erro) -> list[dict]:
    """Converte um ValidationError em [{"path": campo, "message": texto}]."""
    return [
        {"path": _caminho(detalhe["loc"]), "message": traduzir_mensagem(detalhe)}
        for detalhe in erro.errors()
    ]


def resposta_validacao(erros: list[dict]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Erro de validação", "errors": erros},
    )


async def tratar_validacao(request: Request, exc: Exception) -> JSONResponse:
    erros = listar_erros(exc)
    logger.info("Requisição rejeitada %s %s: %d erro(s)", request.method, request.url.path, len(erros))
    return resposta_validacao(erros)


def configurar_tratadores(app: FastAPI):
    app.add_exception_handler(RequestValidationError, tratar_validacao)
    app.add_exception_handler(ValidationError, tratar_validacao)
