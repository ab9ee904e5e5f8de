"""
Inventario Client - Cliente HTTP async para la API de productos.

Helper central de requests: aplica el timeout por defecto, codifica el
body como JSON, parsea la respuesta solo si es JSON y normaliza los
errores. Nunca se traga un error: siempre lo relanza al llamador.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import httpx

from config.constants import HTTPMethod, JSON_CONTENT_TYPE
from config.settings import settings
from cliente.error_classifier import get_error_classifier
from cliente.errors import (
    ErrorType,
    InventarioError,
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
)

logger = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    """Configuración de un request. Se construye en cada llamada."""
    method: HTTPMethod = HTTPMethod.GET
    body: Any = None

    def __post_init__(self):
        # Acepta "get", "POST" o el enum; cualquier otro metodo es ValueError
        if not isinstance(self.method, HTTPMethod):
            self.method = HTTPMethod(str(self.method).upper())

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": JSON_CONTENT_TYPE}
        if self.body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    @property
    def content(self) -> Optional[bytes]:
        if self.body is None:
            return None
        return json.dumps(self.body, ensure_ascii=False).encode("utf-8")


@dataclass
class RequestResult:
    """Resultado de un request sin excepciones."""
    success: bool
    data: Any = None
    error: Optional[InventarioError] = None
    status_code: int = 0
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def error_type(self) -> Optional[ErrorType]:
        return self.error.error_type if self.error else None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""


class InventarioClient:
    """Cliente HTTP async para la API de inventario."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Inicializar cliente.

        Args:
            base_url: URL base de la API. Por defecto la de settings.
            timeout: Timeout total en segundos. Por defecto el de settings.
            transport: Transport httpx alternativo (tests, ASGI).
        """
        self.base_url = (base_url or settings.inventario.INVENTARIO_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.inventario.INVENTARIO_TIMEOUT
        self.transport = transport
        self.classifier = get_error_classifier()

    async def request(
        self,
        endpoint: str,
        method: HTTPMethod = HTTPMethod.GET,
        body: Any = None
    ) -> Any:
        """
        Ejecutar un request contra la API y retornar el payload JSON.

        Args:
            endpoint: Ruta relativa a la URL base (ej: "/productos")
            method: GET o POST
            body: Valor serializable a JSON (opcional)

        Returns:
            Payload JSON parseado, o None si la respuesta no es JSON

        Raises:
            RequestTimeoutError: si se excede el timeout
            NetworkError: si falla el transporte
            HTTPRequestError: si el status no es 2xx (NotFoundError, ValidationError)
            InvalidResponseError: si el body declarado JSON no se puede parsear
        """
        _, data, _ = await self._execute(endpoint, RequestConfig(method=method, body=body))
        return data

    async def safe_request(
        self,
        endpoint: str,
        method: HTTPMethod = HTTPMethod.GET,
        body: Any = None
    ) -> RequestResult:
        """
        Igual que request() pero retorna un RequestResult en vez de lanzar.

        Solo captura errores InventarioError; cualquier otro error
        (bug de programación) se propaga.
        """
        try:
            status_code, data, headers = await self._execute(
                endpoint, RequestConfig(method=method, body=body)
            )
        except InventarioError as e:
            return RequestResult(
                success=False,
                error=e,
                status_code=e.status_code or 0
            )

        return RequestResult(
            success=True,
            data=data,
            status_code=status_code,
            headers=headers
        )

    async def _execute(
        self,
        endpoint: str,
        config: RequestConfig
    ) -> Tuple[int, Any, Dict[str, str]]:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{config.method.value} {url}")

        try:
            # wait_for acota la duración total, httpx solo acota cada fase
            response = await asyncio.wait_for(self._send(url, config), timeout=self.timeout)
        except (httpx.TransportError, asyncio.TimeoutError) as e:
            if self.classifier.classify(e) == ErrorType.TIMEOUT:
                logger.error(f"La petición a {endpoint} excedió el tiempo ({self.timeout}s)")
                raise RequestTimeoutError(
                    f"La petición a {endpoint} excedió el tiempo límite de {self.timeout}s"
                ) from e
            raise NetworkError(f"Error de red al llamar {url}: {e}") from e

        try:
            data = self._parse_body(response)
        except InvalidResponseError:
            if response.is_success:
                raise
            data = None

        if not response.is_success:
            raise self.classifier.error_for_status(response.status_code, data)

        logger.debug(f"{config.method.value} {url} → {response.status_code}")
        return response.status_code, data, dict(response.headers)

    async def _send(self, url: str, config: RequestConfig) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            return await client.request(
                config.method.value,
                url,
                headers=config.headers,
                content=config.content
            )

    def _parse_body(self, response: httpx.Response) -> Any:
        """Parsear JSON solo si el content-type lo declara."""
        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type.lower():
            return None
        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Respuesta JSON inválida (HTTP {response.status_code})",
                status_code=response.status_code
            ) from e
