"""
Base DNS-update agent interface.

This module defines the abstract base class that all update agents must
implement.
"""

from abc import ABC, abstractmethod


class UpdateAgent(ABC):
    """Abstract base class for DNS-update agents."""

    @abstractmethod
    def execute(self, script: str) -> None:
        """Apply an update script; raise ExecutionError on failure."""
        pass
