"""
Transaction Executor - Runs update scripts through the configured agent

This module picks the DNS-update agent named by the configuration and
hands each transaction script to it.
"""

import logging
from typing import Dict

from .base_provider import UpdateAgent
from .bind_provider import DnspythonAgent
from .mock_provider import MockUpdateAgent
from .nsupdate_provider import NsupdateAgent

logger = logging.getLogger(__name__)


class TransactionExecutor:
    """Unified executor that supports multiple update agents."""

    def __init__(self, config: Dict):
        """Initialize executor with configuration."""
        self.config = config
        self.agent = self._get_agent()

    def _get_agent(self) -> UpdateAgent:
        """Get update agent based on configuration."""
        agent_name = self.config.get("default_provider", "nsupdate")
        agent_config = self.config.get("dns_providers", {}).get(agent_name) or {}

        if agent_name == "nsupdate":
            return NsupdateAgent(agent_config)
        elif agent_name == "dnspython":
            return DnspythonAgent(agent_config)
        elif agent_name == "mock":
            return MockUpdateAgent(agent_config)
        else:
            raise ValueError(f"Unknown provider '{agent_name}'")

    def execute(self, script: str) -> None:
        """Apply one transaction script; raises ExecutionError on failure."""
        logger.debug(f"Executing transaction:\n{script}")
        self.agent.execute(script)
