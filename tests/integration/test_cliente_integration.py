"""
Tests de Integración - Cliente contra el servidor mock

El cliente real habla con la app FastAPI en proceso vía
httpx.ASGITransport, sin red ni servidor externo.

Ejecutar:
    pytest tests/integration/test_cliente_integration.py -v
"""

import logging

import pytest

from cliente import (
    ErrorType,
    NotFoundError,
    ValidationError,
    crear_producto,
    listar_productos,
    obtener_producto,
    ruta_producto,
)

from app.services.inventario_store import PRODUCTOS_SEED


class TestRequestHelperIntegration:
    """InventarioClient.request contra el servidor mock."""

    @pytest.mark.asyncio
    async def test_list(self, asgi_client):
        productos = await asgi_client.request("/productos")

        assert productos[0]["nombre"] == "Manzanas"

    @pytest.mark.asyncio
    async def test_missing_field_surfaces_server_message(self, asgi_client):
        """El 400 del servidor llega con su mensaje, no uno genérico."""
        with pytest.raises(ValidationError) as exc_info:
            await asgi_client.request("/productos", method="POST", body={"nombre": "Producto Fantasma"})

        assert exc_info.value.status_code == 400
        assert "precio" in exc_info.value.message
        assert not exc_info.value.message.startswith("Error HTTP")

    @pytest.mark.asyncio
    async def test_not_found(self, asgi_client):
        with pytest.raises(NotFoundError) as exc_info:
            await asgi_client.request("/productos/24")

        assert exc_info.value.message == "Producto 24 no encontrado"


class TestEndpointFunctionsIntegration:
    """Flujo completo de la demo contra el servidor mock."""

    @pytest.mark.asyncio
    async def test_listar(self, asgi_client, capsys):
        productos = await listar_productos(asgi_client)

        assert len(productos) == len(PRODUCTOS_SEED)
        assert "Manzanas" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_crear_y_obtener(self, asgi_client, nuevo_producto):
        creado = await crear_producto(nuevo_producto, asgi_client)

        assert creado["nombre"] == nuevo_producto["nombre"]
        assert await obtener_producto(creado["id"], asgi_client) == creado

    @pytest.mark.asyncio
    async def test_crear_invalido(self, asgi_client, caplog):
        result = await crear_producto({"nombre": "Producto Fantasma"}, asgi_client)

        assert result is None
        assert "Error de validación" in caplog.text
        assert "precio" in caplog.text

    @pytest.mark.asyncio
    async def test_obtener_inexistente(self, asgi_client, caplog):
        """get(24) contra un 404: warning y None, nunca lanza."""
        result = await obtener_producto(24, asgi_client)

        assert result is None
        assert any(r.levelno == logging.WARNING and "24" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_obtener_id_con_slash(self, asgi_client, caplog):
        """El id codificado resuelve el único producto 'auriculares/negros'."""
        caplog.set_level(logging.INFO)

        result = await obtener_producto("auriculares/negros", asgi_client)

        assert result["id"] == "auriculares/negros"
        assert result["nombre"] == "Auriculares Negros"
        assert "Producto encontrado" in caplog.text

    @pytest.mark.asyncio
    async def test_ruta_sin_codificar_no_resuelve_el_producto(self, asgi_client):
        """La concatenación ingenua del id no llega al mismo recurso."""
        codificada = await asgi_client.safe_request(ruta_producto("auriculares/negros"))
        ingenua = await asgi_client.safe_request("/productos/auriculares/negros")

        assert codificada.success is True
        assert codificada.data["id"] == "auriculares/negros"
        assert ingenua.success is False
        assert ingenua.error_type == ErrorType.NOT_FOUND
        assert ingenua.message == "Ruta /productos/auriculares/negros no encontrada"
        assert ingenua.data != codificada.data

    @pytest.mark.asyncio
    async def test_safe_request_result(self, asgi_client):
        result = await asgi_client.safe_request("/productos/999")

        assert result.success is False
        assert result.error_type == ErrorType.NOT_FOUND
