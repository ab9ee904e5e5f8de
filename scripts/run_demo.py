"""
Script de demostración del cliente de inventario.

Ejecuta el flujo completo contra la API configurada en
INVENTARIO_BASE_URL (por defecto el servidor mock en :4010):

1. Listar todo el inventario
2. Crear un producto válido
3. Crear un producto inválido (sin precio) → error de validación
4. Obtener un producto con id "auriculares/negros" → id codificado
5. Obtener un producto inexistente (24) → 404

Uso:
    python -m scripts.start_mock_server   # en otra terminal
    python -m scripts.run_demo
"""

import sys
import os
import asyncio
import logging

# Agregar raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.logging_config import setup_logging
from cliente import InventarioClient, crear_producto, listar_productos, obtener_producto

logger = logging.getLogger("scripts.run_demo")


async def run(client: InventarioClient) -> None:
    """Flujo de pruebas de integración contra la API."""
    logger.info(f"Iniciando pruebas de integración contra {client.base_url}...")

    logger.info("--- TEST 1: Listar todo ---")
    inventario = await listar_productos(client)
    if inventario is not None:
        logger.info(f"Total productos cargados: {len(inventario)}")

    logger.info("--- TEST 2: Crear producto válido ---")
    await crear_producto(
        {"nombre": "Café de Grano", "precio": 15.50, "stock": 50},
        client
    )

    logger.info("--- TEST 3: Crear producto inválido (sin precio) ---")
    await crear_producto({"nombre": "Producto Fantasma"}, client)

    logger.info("--- TEST 4: ID con caracteres extraños ---")
    await obtener_producto("auriculares/negros", client)

    logger.info("--- TEST 5: ID inexistente ---")
    await obtener_producto(24, client)

    logger.info("Búsqueda terminada.")


def main():
    setup_logging(service_name="cliente")
    asyncio.run(run(InventarioClient()))


if __name__ == "__main__":
    main()
