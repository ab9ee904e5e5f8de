"""
Tests del clasificador de errores.

python -m pytest tests/test_cliente/test_error_classifier.py
"""

import asyncio

import pytest
import httpx

from cliente.error_classifier import ErrorClassifier, get_error_classifier
from cliente.errors import (
    ErrorType,
    HTTPRequestError,
    InventarioError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ValidationError,
)


@pytest.fixture
def classifier():
    return ErrorClassifier()


@pytest.fixture
def request_ejemplo():
    return httpx.Request("GET", "http://inventario.test/productos")


class TestClassify:
    """Clasificación de excepciones."""

    def test_inventario_errors_keep_their_type(self, classifier):
        assert classifier.classify(RequestTimeoutError("t")) == ErrorType.TIMEOUT
        assert classifier.classify(NetworkError("n")) == ErrorType.NETWORK
        assert classifier.classify(NotFoundError("x", status_code=404)) == ErrorType.NOT_FOUND
        assert classifier.classify(ValidationError("x", status_code=400)) == ErrorType.VALIDATION

    def test_httpx_timeouts(self, classifier, request_ejemplo):
        assert classifier.classify(httpx.ReadTimeout("t", request=request_ejemplo)) == ErrorType.TIMEOUT
        assert classifier.classify(httpx.ConnectTimeout("t", request=request_ejemplo)) == ErrorType.TIMEOUT

    def test_asyncio_timeout(self, classifier):
        assert classifier.classify(asyncio.TimeoutError()) == ErrorType.TIMEOUT

    def test_transport_errors_are_network(self, classifier, request_ejemplo):
        error = httpx.ConnectError("refused", request=request_ejemplo)
        assert classifier.classify(error) == ErrorType.NETWORK

    def test_http_status_error(self, classifier, request_ejemplo):
        response = httpx.Response(404, request=request_ejemplo)
        error = httpx.HTTPStatusError("404", request=request_ejemplo, response=response)
        assert classifier.classify(error) == ErrorType.NOT_FOUND


class TestErrorForStatus:
    """Construcción del error normalizado a partir del status."""

    @pytest.mark.parametrize("status_code, error_cls", [
        (404, NotFoundError),
        (400, ValidationError),
        (422, ValidationError),
        (401, HTTPRequestError),
        (500, HTTPRequestError),
    ])
    def test_error_class_by_status(self, classifier, status_code, error_cls):
        error = classifier.error_for_status(status_code)

        assert type(error) is error_cls
        assert error.status_code == status_code

    def test_uses_server_message(self, classifier):
        error = classifier.error_for_status(400, {"mensaje": "Falta precio"})
        assert error.message == "Falta precio"

    def test_empty_message_falls_back(self, classifier):
        error = classifier.error_for_status(400, {"mensaje": ""})
        assert error.message == "Error HTTP 400"

    def test_non_dict_payload_falls_back(self, classifier):
        error = classifier.error_for_status(500, ["no", "dict"])
        assert error.message == "Error HTTP 500"
        assert error.payload == ["no", "dict"]


class TestErrors:
    """Jerarquía de errores."""

    def test_all_errors_are_inventario_errors(self):
        for error in (
            RequestTimeoutError("t"),
            NetworkError("n"),
            HTTPRequestError("h", status_code=500),
            NotFoundError("nf", status_code=404),
            ValidationError("v", status_code=400),
        ):
            assert isinstance(error, InventarioError)

    def test_error_code_defaults_to_type(self):
        assert NotFoundError("x", status_code=404).error_code == "NOT_FOUND"
        assert RequestTimeoutError("x").error_code == "TIMEOUT"

    def test_explicit_error_code(self):
        error = InventarioError("x", error_code="PRODUCTO_DUPLICADO")
        assert error.error_code == "PRODUCTO_DUPLICADO"

    def test_shared_classifier(self):
        assert get_error_classifier() is get_error_classifier()
