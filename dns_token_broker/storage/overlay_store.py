"""
Read-through overlay store for dry runs.

Reads fall through to a backing store; every write stays in memory, so
the backing store is never modified.
"""

import logging
from typing import Dict, Optional

from .base_store import BindingStore, generate_token
from ..errors import InvalidTokenError, UnknownHostnameError, UnknownTokenError
from ..utils.validators import validate_token_format

logger = logging.getLogger(__name__)


class OverlayBindingStore(BindingStore):
    """Binding store that shadows another store without writing to it."""

    def __init__(self, base: BindingStore):
        """Initialize the overlay on top of base."""
        self.base = base
        # None / False mark entries deleted in the overlay
        self.tokens: Dict[str, Optional[str]] = {}
        self.hostnames: Dict[str, bool] = {}
        logger.info("Overlay binding store initialized; changes will not be persisted")

    def _key(self, token: str) -> str:
        try:
            return validate_token_format(token)
        except InvalidTokenError:
            raise UnknownTokenError()

    def create(self, hostname: str) -> str:
        token = generate_token()
        self.tokens[token] = hostname
        self.hostnames[hostname] = True
        return token

    def lookup(self, token: str) -> str:
        key = self._key(token)
        if key not in self.tokens:
            return self.base.lookup(key)
        if self.tokens[key] is None:
            raise UnknownTokenError()
        return self.tokens[key]

    def delete(self, token: str) -> None:
        key = self._key(token)
        self.lookup(key)
        self.tokens[key] = None

    def exists_hostname(self, hostname: str) -> bool:
        if hostname in self.hostnames:
            return self.hostnames[hostname]
        return self.base.exists_hostname(hostname)

    def remove_hostname(self, hostname: str) -> None:
        if not self.exists_hostname(hostname):
            raise UnknownHostnameError(hostname)
        self.hostnames[hostname] = False
