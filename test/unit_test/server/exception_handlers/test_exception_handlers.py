"""
Unit tests for server exception handlers.

Tests cover the mapping of domain errors to status codes and the global
handler for unexpected errors.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from loungeos.core.errors import (
    AuthenticationError,
    ConflictError,
    InvalidOperationError,
    LoungeOSError,
    NotFoundError,
)
from loungeos.server.exception_handlers import setup_exception_handlers
from loungeos.server.exception_handlers.domain_handler import domain_exception_handler
from loungeos.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/v1/test"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestDomainExceptionHandler:
    """Test suite for the domain exception handler."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc, status_code",
        [
            (NotFoundError("Order", "ORD-1"), 404),
            (InvalidOperationError("Debits must equal credits"), 400),
            (ConflictError("Cannot move order"), 409),
            (AuthenticationError(), 401),
            (LoungeOSError("Generic"), 400),
        ],
    )
    async def test_status_codes(self, mock_request, exc, status_code):
        with patch("loungeos.server.exception_handlers.domain_handler.logger"):
            response = await domain_exception_handler(mock_request, exc)
        assert isinstance(response, JSONResponse)
        assert response.status_code == status_code
        assert json.loads(response.body) == {"detail": exc.message}

    @pytest.mark.asyncio
    async def test_not_found_message(self, mock_request):
        with patch("loungeos.server.exception_handlers.domain_handler.logger"):
            response = await domain_exception_handler(mock_request, NotFoundError("Product", 42))
        assert json.loads(response.body) == {"detail": "Product not found: 42"}

    @pytest.mark.asyncio
    async def test_logs_warning(self, mock_request):
        with patch("loungeos.server.exception_handlers.domain_handler.logger") as mock_logger:
            await domain_exception_handler(mock_request, ConflictError("Taken"))
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[1]["extra"]["status_code"] == 409


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        """Test that exception handler logs errors."""
        exc = ValueError("Test error")

        with patch("loungeos.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_with_error_id(self, mock_request):
        """Test that the response carries the error id found in the log."""
        with patch("loungeos.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await global_exception_handler(mock_request, RuntimeError("boom"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert body["error_id"] == mock_logger.error.call_args[1]["extra"]["error_id"]

    @pytest.mark.asyncio
    async def test_handler_without_client(self, mock_request):
        mock_request.client = None
        with patch("loungeos.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("boom"))
        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestSetupExceptionHandlers:
    """Test registration on a FastAPI application."""

    def test_registers_handlers(self):
        app = FastAPI()
        setup_exception_handlers(app)
        assert app.exception_handlers[LoungeOSError] is domain_exception_handler
        assert app.exception_handlers[Exception] is global_exception_handler

    @pytest.mark.asyncio
    async def test_domain_error_through_app(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Table", 7)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {"detail": "Table not found: 7"}
