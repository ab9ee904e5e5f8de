"""Modelos Pydantic del servidor mock."""

from app.models.producto import Producto, ProductoCreate
from app.models.responses import ErrorResponse, HealthResponse

__all__ = [
    "Producto",
    "ProductoCreate",
    "ErrorResponse",
    "HealthResponse",
]
