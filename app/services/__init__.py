"""
Services - Servicios del servidor mock
"""

from app.services.inventario_store import InventarioStore, PRODUCTOS_SEED, get_inventario_store

__all__ = [
    "InventarioStore",
    "PRODUCTOS_SEED",
    "get_inventario_store",
]
