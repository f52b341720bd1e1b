"""
Binding store implementations.

This package contains the token/hostname binding store interface and its
filesystem and in-memory backends.
"""

import logging
from typing import Dict

from .base_store import BindingStore, generate_token
from .file_store import FileBindingStore
from .memory_store import MemoryBindingStore
from .overlay_store import OverlayBindingStore

logger = logging.getLogger(__name__)


def create_store(config: Dict) -> BindingStore:
    """Build the binding store named by the ``storage`` config section."""
    storage_config = config.get("storage", {})
    backend = storage_config.get("backend", "file")

    if backend == "file":
        return FileBindingStore(storage_config.get("data_dir", "./data"))
    elif backend == "memory":
        return MemoryBindingStore()
    else:
        raise ValueError(f"Unknown storage backend '{backend}'")


__all__ = [
    "BindingStore",
    "FileBindingStore",
    "MemoryBindingStore",
    "OverlayBindingStore",
    "create_store",
    "generate_token",
]
