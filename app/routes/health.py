"""
Rutas de health check.

GET /health - Estado del servidor mock y cantidad de productos
"""

from fastapi import APIRouter, Depends

from app.models.responses import HealthResponse
from app.services.inventario_store import InventarioStore, get_inventario_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check"
)
async def health_check(
    store: InventarioStore = Depends(get_inventario_store)
) -> HealthResponse:
    """Health check del servidor mock."""
    return HealthResponse(productos=len(store))


@router.get(
    "/",
    include_in_schema=False
)
async def root():
    """Índice del servidor."""
    return {
        "service": "Productos Mock API",
        "docs": "/docs",
        "health": "/health",
        "productos": "/productos"
    }
