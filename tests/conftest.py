import pytest
import httpx

from app.main import create_app
from cliente.http.inventario_client import InventarioClient

BASE_URL = "http://inventario.test"


@pytest.fixture
def productos_sample():
    """Respuesta de ejemplo de GET /productos."""
    return [
        {"id": 1, "nombre": "Manzanas", "precio": 2.5, "stock": 100}
    ]


@pytest.fixture
def nuevo_producto():
    """Payload válido para crear un producto."""
    return {"nombre": "Café de Grano", "precio": 15.5, "stock": 50}


@pytest.fixture
def make_client():
    """
    Fabrica de InventarioClient con un MockTransport.

    Uso:
        client = make_client(lambda request: httpx.Response(200, json=[]))
    """
    def _make(handler, timeout: float = 5.0) -> InventarioClient:
        return InventarioClient(
            base_url=BASE_URL,
            timeout=timeout,
            transport=httpx.MockTransport(handler)
        )
    return _make


@pytest.fixture
def mock_app():
    """App del servidor mock con inventario de ejemplo."""
    return create_app(seed=True)


@pytest.fixture
def asgi_client(mock_app):
    """Cliente que habla con el servidor mock en proceso (sin red)."""
    return InventarioClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=mock_app)
    )
