"""
Almacén en memoria del servidor mock de productos.

Cada app creada con create_app() tiene su propio store en app.state,
así los tests no comparten estado.
"""

import logging
import threading
from typing import Dict, List, Optional, Union

from fastapi import Request

from app.models.producto import Producto, ProductoCreate

logger = logging.getLogger(__name__)

# Los productos sin "id" reciben uno incremental
PRODUCTOS_SEED = [
    {"nombre": "Manzanas", "precio": 2.5, "stock": 100},
    {"nombre": "Café de Grano", "precio": 15.5, "stock": 50},
    {"nombre": "Miel Orgánica", "precio": 8.0, "stock": 20},
    {"id": "auriculares/negros", "nombre": "Auriculares Negros", "precio": 35.0, "stock": 12},
]


class InventarioStore:
    """Productos indexados por str(id). Los ids asignados son enteros incrementales."""

    def __init__(self, seed: bool = False):
        self._productos: Dict[str, Producto] = {}
        self._next_id = 1
        self._lock = threading.Lock()

        if seed:
            for data in PRODUCTOS_SEED:
                campos = {k: v for k, v in data.items() if k != "id"}
                self.crear(ProductoCreate(**campos), producto_id=data.get("id"))
            logger.info(f"Inventario inicializado con {len(self._productos)} productos")

    def listar(self) -> List[Producto]:
        with self._lock:
            return list(self._productos.values())

    def obtener(self, producto_id: Union[str, int]) -> Optional[Producto]:
        with self._lock:
            return self._productos.get(str(producto_id))

    def crear(
        self,
        data: ProductoCreate,
        producto_id: Optional[Union[str, int]] = None
    ) -> Producto:
        with self._lock:
            if producto_id is None:
                producto_id = self._next_id
                self._next_id += 1
            producto = Producto(id=producto_id, **data.model_dump())
            self._productos[str(producto.id)] = producto
        logger.debug(f"Producto creado: {producto.id} ({producto.nombre})")
        return producto

    def __len__(self) -> int:
        with self._lock:
            return len(self._productos)


def get_inventario_store(request: Request) -> InventarioStore:
    """Store de la app actual (inyección FastAPI)."""
    return request.app.state.store
