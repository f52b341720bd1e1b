"""
In-memory binding store for testing and demonstration.

This module provides a binding store that keeps both namespaces in
dictionaries, for tests and throwaway deployments.
"""

import logging
from typing import Dict

from .base_store import BindingStore, generate_token
from ..errors import InvalidTokenError, UnknownHostnameError, UnknownTokenError
from ..utils.validators import validate_token_format

logger = logging.getLogger(__name__)


class MemoryBindingStore(BindingStore):
    """In-memory binding store."""

    def __init__(self):
        """Initialize the empty store."""
        self.tokens: Dict[str, str] = {}
        self.hostnames: Dict[str, str] = {}
        logger.info("Memory binding store initialized")

    def _key(self, token: str) -> str:
        try:
            return validate_token_format(token)
        except InvalidTokenError:
            raise UnknownTokenError()

    def create(self, hostname: str) -> str:
        token = generate_token()
        while token in self.tokens:
            token = generate_token()

        self.tokens[token] = hostname
        self.hostnames[hostname] = ""
        return token

    def lookup(self, token: str) -> str:
        try:
            return self.tokens[self._key(token)]
        except KeyError:
            raise UnknownTokenError()

    def delete(self, token: str) -> None:
        try:
            del self.tokens[self._key(token)]
        except KeyError:
            raise UnknownTokenError()

    def exists_hostname(self, hostname: str) -> bool:
        return hostname in self.hostnames

    def remove_hostname(self, hostname: str) -> None:
        try:
            del self.hostnames[hostname]
        except KeyError:
            raise UnknownHostnameError(hostname)
