"""
API pública de productos.

Funciones de endpoint sobre InventarioClient. Cada una es el límite
final de errores: registra un mensaje acorde al contexto y retorna
None, nunca lanza hacia el llamador.

- listar_productos():   GET  /productos (imprime tabla)
- obtener_producto(id): GET  /productos/{id} (id codificado)
- crear_producto(data): POST /productos
"""

import logging
from typing import List, Optional, Union
from urllib.parse import quote

from config.constants import Endpoints, HTTPMethod
from cliente.errors import ErrorType
from cliente.http.inventario_client import InventarioClient
from cliente.models import NuevoProducto, Producto
from cliente.tabla import render_tabla

logger = logging.getLogger(__name__)


def ruta_producto(producto_id: Union[str, int]) -> str:
    """
    Ruta de un producto con el id codificado.

    "auriculares/negros" → "/productos/auriculares%2Fnegros"
    """
    return f"{Endpoints.PRODUCTOS.value}/{quote(str(producto_id), safe='')}"


async def listar_productos(client: Optional[InventarioClient] = None) -> Optional[List[Producto]]:
    """
    Listar el inventario e imprimirlo como tabla.

    Returns:
        Lista de productos, o None si falló la carga
    """
    client = client or InventarioClient()

    result = await client.safe_request(Endpoints.PRODUCTOS.value)
    if not result.success:
        logger.error("No se pudo cargar el inventario.")
        logger.debug(f"Detalle [{result.error_type.value}]: {result.message}")
        return None

    productos = result.data
    print(render_tabla(productos or []))
    return productos


async def obtener_producto(
    producto_id: Union[str, int],
    client: Optional[InventarioClient] = None
) -> Optional[Producto]:
    """
    Obtener un producto por id.

    Args:
        producto_id: Id del producto; se codifica antes de armar la ruta

    Returns:
        Producto, o None si no existe o falló la búsqueda
    """
    client = client or InventarioClient()

    result = await client.safe_request(ruta_producto(producto_id))
    if not result.success:
        if result.error_type == ErrorType.NOT_FOUND:
            logger.warning(f"El producto con ID {producto_id} no existe: {result.message}")
        else:
            logger.warning(f"Error obteniendo producto {producto_id}: {result.message}")
        return None

    logger.info(f"Producto encontrado: {result.data}")
    return result.data


async def crear_producto(
    nuevo_producto: NuevoProducto,
    client: Optional[InventarioClient] = None
) -> Optional[Producto]:
    """
    Crear un producto.

    El registro se envía tal cual; el servidor lo valida.

    Returns:
        Producto creado, o None si el servidor lo rechazó o falló el request
    """
    client = client or InventarioClient()

    result = await client.safe_request(
        Endpoints.PRODUCTOS.value,
        method=HTTPMethod.POST,
        body=nuevo_producto
    )
    if not result.success:
        if result.error_type == ErrorType.VALIDATION:
            logger.error(f"Error de validación: {result.message}")
        else:
            logger.error(f"Error creando producto: {result.message}")
        return None

    logger.info(f"Creado: {result.data}")
    return result.data
