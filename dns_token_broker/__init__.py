"""
DNS Token Broker - token-authenticated dynamic DNS

Issues tokens bound to hostnames under a managed zone and keeps their
A/AAAA records pointed wherever the token holder says, through nsupdate
or a direct RFC 2136 update.
"""

__version__ = "1.0.0"
__author__ = "DNS Token Broker Team"
__description__ = "Token-authenticated dynamic DNS hostname broker"

from .core.binding_manager import BindingManager
from .providers.executor import TransactionExecutor
from .storage import BindingStore, FileBindingStore, MemoryBindingStore

__all__ = [
    "BindingManager",
    "TransactionExecutor",
    "BindingStore",
    "FileBindingStore",
    "MemoryBindingStore",
]
