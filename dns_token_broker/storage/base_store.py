"""
Base binding store interface.

This module defines the abstract base class that all binding stores must
implement. A store keeps two namespaces: tokens (token -> hostname) and
hostnames (claimed-hostname markers).
"""

import secrets
from abc import ABC, abstractmethod


def generate_token() -> str:
    """Return a fresh 128-bit token as 32 lowercase hex characters."""
    return secrets.token_hex(16)


class BindingStore(ABC):
    """Abstract base class for binding stores."""

    @abstractmethod
    def create(self, hostname: str) -> str:
        """Issue a token for hostname and mark the hostname as claimed."""
        pass

    @abstractmethod
    def lookup(self, token: str) -> str:
        """Return the hostname bound to token."""
        pass

    @abstractmethod
    def delete(self, token: str) -> None:
        """Remove the token entry."""
        pass

    @abstractmethod
    def exists_hostname(self, hostname: str) -> bool:
        """Check whether a hostname marker exists."""
        pass

    @abstractmethod
    def remove_hostname(self, hostname: str) -> None:
        """Remove the hostname marker."""
        pass
