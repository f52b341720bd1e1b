"""
Transaction - Update-script generation for DNS record changes

This module renders nsupdate-style directive scripts. Inputs are trusted:
hostname and address must already have passed the validators.
"""

import enum
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

RECORD_TTL = 60


class RecordOperation(enum.Enum):
    """Kinds of update transaction the broker can issue."""

    CREATE_A = "A"
    CREATE_AAAA = "AAAA"
    DELETE_ALL = "DELETE"

    @classmethod
    def for_ip_version(cls, version: int) -> "RecordOperation":
        """Return the create operation matching an IP version."""
        if version == 4:
            return cls.CREATE_A
        if version == 6:
            return cls.CREATE_AAAA
        raise ValueError(f"No record type for IP version {version}")


def build_transaction(
    operation: RecordOperation,
    hostname: str,
    ip: Optional[str],
    zone: str,
    server: str,
) -> str:
    """
    Build the update script for one operation on one name.

    Args:
        operation: Which records to touch
        hostname: Validated label, appended to the zone
        ip: Validated address; required for the create operations
        zone: Zone the label lives in
        server: Authoritative server that receives the update

    Returns:
        A newline-terminated directive script
    """
    fqdn = f"{hostname}.{zone}"
    lines: List[str] = [f"server {server}", f"zone {zone}"]

    if operation is RecordOperation.DELETE_ALL:
        lines.append(f"update delete {fqdn} IN A")
        lines.append(f"update delete {fqdn} IN AAAA")
    else:
        if ip is None:
            raise ValueError(f"{operation.name} requires an address")
        record_type = operation.value
        lines.append(f"update delete {fqdn} IN {record_type}")
        lines.append(f"update add {fqdn} {RECORD_TTL} IN {record_type} {ip}")

    lines.append("send")
    script = "\n".join(lines) + "\n"
    logger.debug(f"Built {operation.name} transaction for {fqdn}")
    return script
