"""
Unit tests for the request monitoring middleware.

This test suite covers:
- Request/response processing
- Process-time header injection
- Slow request detection
- Error propagation
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from loungeos.server.middleware.request_monitoring import RequestMonitoringMiddleware


def _request(method: str = "GET", path: str = "/api/v1/test"):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestRequestMonitoringDispatch:
    """Test RequestMonitoringMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        """Test that successful requests are reported and timed."""

        async def call_next(request):
            return Response(content="test", status_code=200)

        middleware = RequestMonitoringMiddleware(app=AsyncMock())

        with patch("loungeos.server.middleware.request_monitoring.log_api_request") as mock_log:
            response = await middleware.dispatch(_request(), call_next)

        assert response.status_code == 200
        assert "X-Process-Time" in response.headers
        mock_log.assert_called_once()
        assert mock_log.call_args[1]["method"] == "GET"
        assert mock_log.call_args[1]["path"] == "/api/v1/test"
        assert mock_log.call_args[1]["status_code"] == 200

    @pytest.mark.asyncio
    async def test_middleware_warns_on_slow_request(self):
        """Test that requests above the threshold log a warning."""

        async def call_next(request):
            return Response(status_code=201)

        middleware = RequestMonitoringMiddleware(app=AsyncMock())

        with (
            patch("loungeos.server.middleware.request_monitoring.log_api_request"),
            patch("loungeos.server.middleware.request_monitoring.SLOW_REQUEST_MS", -1),
            patch("loungeos.server.middleware.request_monitoring.logger") as mock_logger,
        ):
            await middleware.dispatch(_request("POST", "/api/v1/orders"), call_next)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[1]["extra"]["status_code"] == 201

    @pytest.mark.asyncio
    async def test_middleware_reraises_errors(self):
        """Test that errors are logged as 500 and propagated."""

        async def call_next(request):
            raise RuntimeError("boom")

        middleware = RequestMonitoringMiddleware(app=AsyncMock())

        with (
            patch("loungeos.server.middleware.request_monitoring.log_api_request") as mock_log,
            patch("loungeos.server.middleware.request_monitoring.logger") as mock_logger,
        ):
            with pytest.raises(RuntimeError, match="boom"):
                await middleware.dispatch(_request(), call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        assert mock_logger.error.call_args[1]["extra"]["error"] == "boom"
