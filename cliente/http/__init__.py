"""
Subpaquete HTTP - Cliente para la API de inventario.

Proporciona el helper central de requests con timeout, parseo JSON
condicional y errores normalizados.

Uso:
    from cliente.http import InventarioClient

    client = InventarioClient(base_url="http://127.0.0.1:4010")
    productos = await client.request("/productos")
    result = await client.safe_request("/productos/24")
"""

from cliente.http.inventario_client import InventarioClient, RequestConfig, RequestResult

__all__ = [
    "InventarioClient",
    "RequestConfig",
    "RequestResult",
]
