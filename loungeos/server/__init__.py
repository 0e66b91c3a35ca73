"""
LoungeOS Server Package.

This package contains the web server implementation for LoungeOS.
It includes the API definition, service logic, middleware and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of errors to HTTP responses.
    middleware: Request monitoring.
    services: Business logic spanning several tables.
"""
