"""
Rutas de productos del servidor mock.

GET  /productos       - Listar inventario
GET  /productos/{id}  - Obtener un producto (404 si no existe)
POST /productos       - Crear producto (400 si el payload es inválido)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.models.producto import Producto, ProductoCreate
from app.models.responses import ErrorResponse
from app.services.inventario_store import InventarioStore, get_inventario_store

logger = logging.getLogger(__name__)

PREFIX = "/productos"

router = APIRouter(
    prefix=PREFIX,
    tags=["Productos"],
    responses={
        400: {"model": ErrorResponse, "description": "Error de validación"},
        404: {"model": ErrorResponse, "description": "Producto no encontrado"}
    }
)


def _segmento_crudo(request: Request):
    """Parte de raw_path después de /productos/, sin decodificar (None si no hay raw_path)."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return None
    path = raw_path.split(b"?", 1)[0].decode("latin-1")
    return path.split(f"{PREFIX}/", 1)[-1]


@router.get(
    "",
    response_model=List[Producto],
    summary="Listar productos"
)
async def listar_productos(
    store: InventarioStore = Depends(get_inventario_store)
) -> List[Producto]:
    """Listar todo el inventario."""
    return store.listar()


# ":path" para que un id codificado como "auriculares%2Fnegros" llegue
# completo a este handler. Starlette decodifica %2F antes de rutear, así
# que los segmentos se cuentan sobre raw_path: un "/" sin codificar en el
# id es otra ruta y responde 404.
@router.get(
    "/{producto_id:path}",
    response_model=Producto,
    summary="Obtener producto por id"
)
async def obtener_producto(
    producto_id: str,
    request: Request,
    store: InventarioStore = Depends(get_inventario_store)
) -> Producto:
    """Obtener un producto. Responde 404 si el id no existe."""
    segmento = _segmento_crudo(request)
    if segmento is not None and "/" in segmento:
        logger.info(f"Ruta con segmentos extra: {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Ruta {PREFIX}/{segmento} no encontrada"
        )

    producto = store.obtener(producto_id)
    if producto is None:
        logger.info(f"Producto no encontrado: {producto_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Producto {producto_id} no encontrado"
        )
    return producto


@router.post(
    "",
    response_model=Producto,
    status_code=status.HTTP_201_CREATED,
    summary="Crear producto"
)
async def crear_producto(
    data: ProductoCreate,
    store: InventarioStore = Depends(get_inventario_store)
) -> Producto:
    """Crear un producto. Los campos nombre, precio y stock son obligatorios."""
    producto = store.crear(data)
    logger.info(f"Producto creado: {producto.id} ({producto.nombre})")
    return producto
