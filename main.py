import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import RedirectResponse
from starlette import status as status_codes

# --- Configuração e logging ---
from moto_api.config import settings
from moto_api.logging_config import setup_logging
# ------------------------------

# --- BANCO DE DADOS ---
from moto_api.database import init_db
from moto_api.exceptions import MotoApiError
#-----------------------

# --- Importação dos Roteadores ---
from moto_api.routers.motos import router as motos_router
from moto_api.routers.usuarios import router as usuarios_router
from moto_api.routers.manutencoes import router as manutencoes_router
# ---------------------------------

setup_logging(settings.log_level, settings.log_file or None)
logger = logging.getLogger(__name__)

# Cria a instância principal do FastAPI
app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    description=settings.description,
)
init_db()


# Erros de domínio (404 / 400) levantados pelos serviços
@app.exception_handler(MotoApiError)
async def moto_api_error_handler(request: Request, exc: MotoApiError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Qualquer outra falha (ex: banco fora do ar) vira 500 e fica registrada no log
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Erro ao processar %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status_codes.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "type": type(exc).__name__},
    )


# Inclui os roteadores (ordem não importa)
app.include_router(motos_router)
app.include_router(usuarios_router)
app.include_router(manutencoes_router)


# Raiz redireciona para a documentação interativa
@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return RedirectResponse(
        url=app.docs_url,
        status_code=status_codes.HTTP_302_FOUND
    )


@app.get("/status")
def status(request: Request):
    return {
        "status": "ok",
        "version": settings.api_version,
        "host": request.client.host if request.client else None,
        "port": request.url.port or 80,
        "scheme": request.url.scheme,
        "path": request.url.path,
    }


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
