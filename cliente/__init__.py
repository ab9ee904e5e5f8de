"""
Cliente - Cliente HTTP para la API de inventario de productos.

Componentes:
- http/: Helper central de requests (timeout, JSON, errores)
- productos: Funciones de endpoint (listar, obtener, crear)
- errors / error_classifier: Errores normalizados y su clasificación
- tabla: Render de listados como tabla de texto
"""

from cliente.errors import (
    ErrorType,
    HTTPRequestError,
    InvalidResponseError,
    InventarioError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ValidationError,
)
from cliente.http import InventarioClient, RequestConfig, RequestResult
from cliente.productos import crear_producto, listar_productos, obtener_producto, ruta_producto

__all__ = [
    # HTTP
    "InventarioClient",
    "RequestConfig",
    "RequestResult",
    # Endpoints
    "listar_productos",
    "obtener_producto",
    "crear_producto",
    "ruta_producto",
    # Errors
    "ErrorType",
    "InventarioError",
    "RequestTimeoutError",
    "NetworkError",
    "HTTPRequestError",
    "NotFoundError",
    "ValidationError",
    "InvalidResponseError",
]
