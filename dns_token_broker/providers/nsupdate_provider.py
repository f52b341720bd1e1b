"""
nsupdate agent implementation.

This module drives the BIND ``nsupdate`` utility as a child process,
one process per transaction.
"""

import logging
import shlex
import subprocess
from typing import Dict, List, Optional

from .base_provider import UpdateAgent
from ..errors import ExecutionError

logger = logging.getLogger(__name__)


class NsupdateAgent(UpdateAgent):
    """Runs update scripts through an external nsupdate process."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize the agent from its provider configuration."""
        config = config or {}
        self.command = config.get("command", "nsupdate")
        self.key_file = config.get("key_file", "")
        self.timeout = config.get("timeout")

        logger.info(f"nsupdate agent initialized with command {self.command!r}")

    def _build_argv(self) -> List[str]:
        argv = shlex.split(self.command) if isinstance(self.command, str) else list(self.command)
        if self.key_file:
            argv.extend(["-k", self.key_file])
        return argv

    def execute(self, script: str) -> None:
        argv = self._build_argv()
        try:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            logger.error(f"Failed to start {argv[0]}: {e}")
            raise ExecutionError(f"Failed to start {argv[0]}: {e}", reason=str(e))

        try:
            stdout, stderr = process.communicate(input=script, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            process.kill()
            process.communicate()
            logger.error(f"{argv[0]} timed out after {self.timeout} seconds")
            raise ExecutionError(
                f"{argv[0]} timed out after {self.timeout} seconds", reason="timeout"
            )

        if process.returncode == 0:
            logger.debug(f"{argv[0]} applied transaction")
            return

        if process.returncode < 0:
            signal = -process.returncode
            message = f"{argv[0]} exited with code None and signal {signal}"
            logger.error(message)
            raise ExecutionError(message, signal=signal)

        message = f"{argv[0]} exited with code {process.returncode} and signal None"
        if stderr and stderr.strip():
            logger.error(f"{message}: {stderr.strip()}")
        else:
            logger.error(message)
        raise ExecutionError(message, returncode=process.returncode)
