import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

load_dotenv()

from routes import (
    bem_routes,
    campus_routes,
    importacao_routes,
    inventario_routes,
    levantamento_routes,
    login_routes,
    relatorio_routes,
    rota_routes,
    sala_routes,
    usuario_routes,
)
from util.auth import checar_autenticacao, configurar_swagger_auth
from util.db import criar_indices
from util.erros import configurar_tratadores


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await run_in_threadpool(criar_indices)
    yield


app = FastAPI(title="Inventário de Bens", lifespan=lifespan)
app.middleware("http")(checar_autenticacao)
configurar_tratadores(app)
app.include_router(login_routes.router)
app.include_router(campus_routes.router)
app.include_router(sala_routes.router)
app.include_router(usuario_routes.router)
app.include_router(inventario_routes.router)
app.include_router(bem_routes.router)
app.include_router(levantamento_routes.router)
app.include_router(rota_routes.router)
app.include_router(importacao_routes.router)
app.include_router(relatorio_routes.router)
configurar_swagger_auth(app)
