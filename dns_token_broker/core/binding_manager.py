"""
Binding Manager - Lifecycle of token-authenticated hostname bindings

A binding is born with create, re-asserts its DNS record on every update
and ends with delete. This module sequences validation, the binding store,
transaction generation and the executor for each of those steps.
"""

import logging
from typing import Dict, Mapping, Optional

from ..errors import (
    BrokerError,
    ExecutionError,
    HostnameTakenError,
    InvalidIpError,
    MissingFieldError,
    UnknownHostnameError,
    UnknownTokenError,
)
from ..providers.executor import TransactionExecutor
from ..storage import BindingStore, create_store
from ..utils.locks import KeyedLock
from ..utils.validators import ip_version, validate_hostname, validate_ip
from .transaction import RecordOperation, build_transaction

logger = logging.getLogger(__name__)


class BindingManager:
    """Main lifecycle class that orchestrates create, update and delete."""

    def __init__(
        self,
        config: Dict,
        store: Optional[BindingStore] = None,
        executor: Optional[TransactionExecutor] = None,
    ):
        """Initialize the manager; store and executor default to the configured ones."""
        self.config = config
        ddns_config = config.get("ddns", {})
        self.zone = ddns_config.get("zone", "example.com.")
        self.server = ddns_config.get("server", "127.0.0.1")

        self.store = store if store is not None else create_store(config)
        self.executor = executor if executor is not None else TransactionExecutor(config)
        self._hostname_locks = KeyedLock()

        logger.info(f"Binding manager serving zone {self.zone} via {self.server}")

    def create(self, hostname: Optional[str]) -> str:
        """Claim an unclaimed hostname and return its new token."""
        if not hostname:
            raise MissingFieldError("hostname")
        hostname = validate_hostname(hostname)

        with self._hostname_locks.hold(hostname):
            if self.store.exists_hostname(hostname):
                logger.warning(f"Hostname {hostname} is already claimed")
                raise HostnameTakenError(hostname)
            token = self.store.create(hostname)

        logger.info(f"Created binding for {hostname}")
        return token

    def _resolve(self, token: Optional[str]) -> str:
        if not token:
            raise MissingFieldError("token")
        return self.store.lookup(token)

    def update(self, token: Optional[str], ip: Optional[str]) -> Dict[str, str]:
        """
        Point the token's hostname at ip.

        Args:
            token: Credential returned by create
            ip: IPv4 or IPv6 address in textual form

        Returns:
            {"a": ip} or {"aaaa": ip}, naming the record that was applied
        """
        hostname = self._resolve(token)

        with self._hostname_locks.hold(hostname):
            # the binding may have been deleted while we waited
            if self.store.lookup(token) != hostname or not self.store.exists_hostname(hostname):
                logger.warning(f"Token resolves to unclaimed hostname {hostname}")
                raise UnknownTokenError()

            version = ip_version(ip)
            if version is None:
                logger.warning(f"Rejected address {ip!r} for {hostname}")
                raise InvalidIpError()

            operation = RecordOperation.for_ip_version(version)
            address = validate_ip(ip, version)
            script = build_transaction(
                operation, validate_hostname(hostname), address, self.zone, self.server
            )
            self.executor.execute(script)

        logger.info(f"Updated {operation.value} record: {hostname}.{self.zone} -> {address}")
        return {operation.value.lower(): address}

    def delete(self, token: Optional[str]) -> None:
        """Remove the DNS records and the binding behind token."""
        hostname = self._resolve(token)

        with self._hostname_locks.hold(hostname):
            self.store.lookup(token)

            script = build_transaction(
                RecordOperation.DELETE_ALL,
                validate_hostname(hostname),
                None,
                self.zone,
                self.server,
            )
            self.executor.execute(script)

            self.store.delete(token)
            try:
                self.store.remove_hostname(hostname)
            except UnknownHostnameError:
                logger.warning(f"Hostname marker for {hostname} was already removed")

        logger.info(f"Deleted binding for {hostname}")

    def handle(self, operation: str, fields: Mapping[str, str]) -> Dict:
        """
        Run one named operation and build its response.

        Args:
            operation: "create", "update" or "delete"
            fields: String-valued request fields (hostname, token, ip)

        Returns:
            {"error": None, ...} on success, {"error": message} on failure
        """
        try:
            if operation == "create":
                return {"error": None, "token": self.create(fields.get("hostname"))}

            if operation == "update":
                result = {"error": None}
                result.update(self.update(fields.get("token"), fields.get("ip")))
                return result

            if operation == "delete":
                self.delete(fields.get("token"))
                return {"error": None}
        except ExecutionError as e:
            logger.error(f"{operation} failed: {e}")
            return {"error": str(e)}
        except BrokerError as e:
            logger.warning(f"{operation} rejected: {e}")
            return {"error": str(e)}

        logger.warning(f"Unknown operation {operation!r}")
        return {"error": "Invalid URL"}
