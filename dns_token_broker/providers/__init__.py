"""
DNS-update agent implementations.

This package contains the transaction executor and the agents it can
drive: nsupdate, dnspython, and a mock agent.
"""

from .base_provider import UpdateAgent
from .bind_provider import DnspythonAgent
from .executor import TransactionExecutor
from .mock_provider import MockUpdateAgent
from .nsupdate_provider import NsupdateAgent

__all__ = [
    "UpdateAgent",
    "DnspythonAgent",
    "TransactionExecutor",
    "MockUpdateAgent",
    "NsupdateAgent",
]
