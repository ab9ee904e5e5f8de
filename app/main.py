"""
Productos Mock API - Servidor local de la API de inventario

Implementa los endpoints que consume el cliente (cliente/) con un
almacén en memoria. Los errores responden con {"mensaje": ...}, que es
el campo que el cliente usa como texto del error.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from app.routes import health, productos
from app.services.inventario_store import InventarioStore

logger = logging.getLogger(__name__)


def _formatear_errores(exc: RequestValidationError) -> list:
    errores = []
    for error in exc.errors():
        campo = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errores.append({"campo": campo or "body", "detalle": error.get("msg", "")})
    return errores


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException → {"mensaje": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"mensaje": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Errores de validación → 400 con mensaje legible."""
    errores = _formatear_errores(exc)
    mensaje = "Datos inválidos: " + "; ".join(f"{e['campo']}: {e['detalle']}" for e in errores)
    logger.info(f"Validación rechazada en {request.url.path}: {mensaje}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"mensaje": mensaje, "errores": errores}
    )


def create_app(seed: Optional[bool] = None) -> FastAPI:
    """
    Crear la app con su propio inventario en memoria.

    Args:
        seed: Cargar productos de ejemplo. Por defecto MOCK_SEED_DATA.
    """
    if seed is None:
        seed = settings.mock_server.MOCK_SEED_DATA

    app = FastAPI(
        title="Productos Mock API",
        description="API de inventario en memoria para desarrollo y tests.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.store = InventarioStore(seed=seed)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    app.include_router(productos.router)

    return app


app = create_app()

# Entry point para desarrollo
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.mock_server.MOCK_HOST,
        port=settings.mock_server.MOCK_PORT,
        reload=settings.general.DEBUG,
        log_level=settings.general.LOG_LEVEL.lower()
    )
