"""
Mock update agent for testing and demonstration.

This module provides an agent that records scripts in memory instead of
sending them anywhere.
"""

import logging
from typing import Dict, List

from .base_provider import UpdateAgent
from ..errors import ExecutionError

logger = logging.getLogger(__name__)


class MockUpdateAgent(UpdateAgent):
    """Mock agent for testing and dry runs."""

    def __init__(self, config: Dict = None):
        """Initialize mock agent."""
        config = config or {}
        self.fail = config.get("fail", False)
        self.scripts: List[str] = []
        logger.info("Mock update agent initialized")

    def execute(self, script: str) -> None:
        if self.fail:
            logger.info("Mock: Rejecting transaction")
            raise ExecutionError("mock agent exited with code 1 and signal None", returncode=1)

        self.scripts.append(script)
        logger.info(f"Mock: Accepted transaction #{len(self.scripts)}")
