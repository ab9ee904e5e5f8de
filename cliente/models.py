"""Tipos de datos que devuelve la API de inventario."""

from typing import Any, Dict, TypedDict, Union


class Producto(TypedDict, total=False):
    """Producto tal como lo devuelve el servidor. La validación es del servidor."""
    id: Union[int, str]
    nombre: str
    precio: float
    stock: int


# Registro candidato para crear_producto(); puede tener cualquier forma
NuevoProducto = Dict[str, Any]
