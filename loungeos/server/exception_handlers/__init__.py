"""
Exception handlers for the LoungeOS server.

Domain errors raised by services become JSON responses with their own status
code; anything else is logged with an error id and answered with a 500.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
