"""
HTTP transport for the token broker.
"""

from .http_app import create_app, run_server

__all__ = ["create_app", "run_server"]
