"""
Core binding lifecycle functionality.

This package contains the lifecycle controller and the update-script
generator.
"""

from .binding_manager import BindingManager
from .transaction import RECORD_TTL, RecordOperation, build_transaction

__all__ = ["BindingManager", "RECORD_TTL", "RecordOperation", "build_transaction"]
