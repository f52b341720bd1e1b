"""
Utility functions and helpers.

This package contains utility functions for validation,
configuration, and other common operations.
"""

from .validators import ip_version, validate_hostname, validate_ip, validate_token_format

__all__ = ["ip_version", "validate_hostname", "validate_ip", "validate_token_format"]
