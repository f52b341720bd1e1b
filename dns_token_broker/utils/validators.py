"""
Validators - Input validation for broker requests

This module provides validation functions for hostnames, IP addresses
and tokens. Each validator returns the normalized value or raises a
ValidationError subclass.
"""

import ipaddress
import logging
import re
from typing import Optional

from ..errors import InvalidHostnameError, InvalidIpError, InvalidTokenError

logger = logging.getLogger(__name__)

HOSTNAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$")
TOKEN_PATTERN = re.compile(r"^[a-f0-9]{32}$", re.IGNORECASE)
IP_CHARS_PATTERN = re.compile(r"[0-9a-fA-F.:]+")


def validate_hostname(raw) -> str:
    """
    Validate a single DNS label chosen by the caller.

    Args:
        raw: The hostname to validate

    Returns:
        The lowercased hostname

    Raises:
        InvalidHostnameError: if the label is not 2-63 characters of
            [a-z0-9-] with alphanumeric first and last characters
    """
    if not isinstance(raw, str):
        raise InvalidHostnameError()

    hostname = raw.lower()
    # fullmatch so a trailing newline cannot slip past "$"
    if not HOSTNAME_PATTERN.fullmatch(hostname):
        logger.warning(f"Invalid hostname: {raw!r}")
        raise InvalidHostnameError()

    return hostname


def ip_version(raw) -> Optional[int]:
    """Return 4 or 6 for a textual IP address, None for anything else."""
    # no scope IDs, whitespace or control characters
    if not isinstance(raw, str) or not IP_CHARS_PATTERN.fullmatch(raw):
        return None

    try:
        return ipaddress.ip_address(raw).version
    except ValueError:
        return None


def validate_ip(raw, expected_version: int) -> str:
    """
    Validate an IP address of a specific version.

    Args:
        raw: The address to validate
        expected_version: 4 or 6

    Returns:
        The address in canonical form (lowercase, IPv6 compressed)

    Raises:
        InvalidIpError: if the address is not a plain address of the
            expected version
    """
    if ip_version(raw) != expected_version:
        logger.warning(f"Invalid IPv{expected_version} address: {raw!r}")
        raise InvalidIpError(f"Invalid IP address for version {expected_version}")

    return str(ipaddress.ip_address(raw))


def validate_token_format(raw) -> str:
    """Check that a token is exactly 32 hex characters; returns it lowercased."""
    if not isinstance(raw, str) or not TOKEN_PATTERN.fullmatch(raw):
        raise InvalidTokenError()

    return raw.lower()
