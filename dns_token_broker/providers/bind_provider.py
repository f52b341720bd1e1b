"""
In-process BIND update agent.

This module applies the same directive scripts that nsupdate understands,
but sends them as an RFC 2136 UPDATE using the dnspython library.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

import dns.exception
import dns.name
import dns.query
import dns.rcode
import dns.tsigkeyring
import dns.update

from .base_provider import UpdateAgent
from ..errors import ExecutionError

logger = logging.getLogger(__name__)


class DnspythonAgent(UpdateAgent):
    """Update agent that talks to the authoritative server directly."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize the agent, loading a TSIG key when configured."""
        config = config or {}
        self.port = config.get("port", 53)
        self.timeout = config.get("timeout", 30)
        self.key_file = config.get("key_file", "")
        self.key_name = config.get("key_name", "")

        self.keyring = None
        if self.key_file and self.key_name:
            try:
                with open(self.key_file, "r") as f:
                    key_content = f.read().strip()

                secret = self._parse_bind_key_file(key_content, self.key_name)

                if secret:
                    self.keyring = dns.tsigkeyring.from_text({self.key_name: secret})
                    logger.info(f"TSIG key loaded from {self.key_file}")
                else:
                    logger.warning(
                        f"Could not extract secret for key '{self.key_name}' from {self.key_file}"
                    )
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load TSIG key: {e}")
                logger.debug("Updates will be sent unsigned")

        logger.info(f"dnspython agent initialized (port {self.port})")

    def _parse_bind_key_file(self, key_content: str, key_name: str) -> Optional[str]:
        """Parse BIND key file format to extract the secret for a specific key."""
        key_pattern = rf'key\s+"{re.escape(key_name)}"\s*{{(.*?)}}'
        match = re.search(key_pattern, key_content, re.DOTALL)
        if match:
            secret_match = re.search(r'secret\s+"([^"]+)"', match.group(1))
            if secret_match:
                return secret_match.group(1)
        return None

    def _parse_script(self, script: str) -> Tuple[str, str, List[Tuple]]:
        """Split a directive script into server, zone and update directives."""
        server = None
        zone = None
        directives = []

        for line in script.splitlines():
            parts = line.split()
            if not parts:
                continue
            if parts[0] == "server" and len(parts) == 2:
                server = parts[1]
            elif parts[0] == "zone" and len(parts) == 2:
                zone = parts[1]
            elif parts[:2] == ["update", "delete"] and len(parts) == 5:
                directives.append(("delete", parts[2], parts[4]))
            elif parts[:2] == ["update", "add"] and len(parts) == 7 and parts[3].isdigit():
                directives.append(("add", parts[2], int(parts[3]), parts[5], parts[6]))
            elif parts == ["send"]:
                break
            else:
                raise ExecutionError(f"Unsupported directive: {line}", reason="bad script")

        if server is None or zone is None:
            raise ExecutionError("Script must name a server and a zone", reason="bad script")

        return server, zone, directives

    def _create_update_message(self, zone: str, directives: List[Tuple]) -> dns.update.Update:
        """Create a DNS update message."""
        update = dns.update.Update(zone, keyring=self.keyring)

        for directive in directives:
            fqdn = dns.name.from_text(directive[1])
            if directive[0] == "delete":
                update.delete(fqdn, directive[2])
            else:
                _, _, ttl, rdtype, value = directive
                update.add(fqdn, ttl, rdtype, value)

        return update

    def execute(self, script: str) -> None:
        server, zone, directives = self._parse_script(script)

        try:
            update = self._create_update_message(zone, directives)
            response = dns.query.tcp(update, server, port=self.port, timeout=self.timeout)
        except (dns.exception.DNSException, OSError, ValueError) as e:
            logger.error(f"DNS update to {server} failed: {e}")
            raise ExecutionError(f"DNS update to {server} failed: {e}", reason=str(e))

        if response.rcode() != dns.rcode.NOERROR:
            error_message = (
                f"DNS update failed with response code: {dns.rcode.to_text(response.rcode())}"
            )
            logger.error(error_message)
            raise ExecutionError(error_message, returncode=response.rcode())

        logger.debug(f"Applied {len(directives)} directives to {zone}")
