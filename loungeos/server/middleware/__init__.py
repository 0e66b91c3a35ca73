"""
Middleware modules for the LoungeOS server.
"""

from .request_monitoring import RequestMonitoringMiddleware

__all__ = ["RequestMonitoringMiddleware"]
