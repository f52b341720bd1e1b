"""
Filesystem binding store.

One file per key: ``<data_dir>/tokens/<token>`` holds the hostname and
``<data_dir>/hostnames/<hostname>`` is an empty marker.
"""

import logging
import os
import tempfile
from pathlib import Path

from .base_store import BindingStore, generate_token
from ..errors import InvalidTokenError, UnknownHostnameError, UnknownTokenError
from ..utils.validators import validate_token_format

logger = logging.getLogger(__name__)


class FileBindingStore(BindingStore):
    """Binding store backed by two directories of plain-text files."""

    def __init__(self, data_dir: str):
        """Initialize the store, creating both namespaces if needed."""
        self.data_dir = Path(data_dir)
        self.token_dir = self.data_dir / "tokens"
        self.hostname_dir = self.data_dir / "hostnames"

        self.token_dir.mkdir(parents=True, exist_ok=True)
        self.hostname_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"File binding store initialized at {self.data_dir}")

    def _write(self, path: Path, content: str):
        """Write a whole value atomically via a temp file in the same directory."""
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def _token_path(self, token: str) -> Path:
        try:
            return self.token_dir / validate_token_format(token)
        except InvalidTokenError:
            logger.warning("Rejected malformed token")
            raise UnknownTokenError()

    def create(self, hostname: str) -> str:
        token = generate_token()
        while (self.token_dir / token).exists():
            logger.warning("Token collision, regenerating")
            token = generate_token()

        self._write(self.token_dir / token, hostname)
        self._write(self.hostname_dir / hostname, "")
        logger.debug(f"Stored binding for {hostname}")
        return token

    def lookup(self, token: str) -> str:
        try:
            return self._token_path(token).read_text().strip()
        except FileNotFoundError:
            raise UnknownTokenError()

    def delete(self, token: str) -> None:
        try:
            self._token_path(token).unlink()
        except FileNotFoundError:
            raise UnknownTokenError()

    def exists_hostname(self, hostname: str) -> bool:
        return (self.hostname_dir / hostname).exists()

    def remove_hostname(self, hostname: str) -> None:
        try:
            (self.hostname_dir / hostname).unlink()
        except FileNotFoundError:
            raise UnknownHostnameError(hostname)
