"""
Behave environment configuration for DNS Token Broker scenarios.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zone = "example.com."
    context.test_server = "127.0.0.1"


def before_scenario(context, scenario):
    """Give each scenario its own data directory."""
    context.data_dir = Path(tempfile.mkdtemp(prefix="dns-broker-"))
    context.test_config = {
        "storage": {"backend": "file", "data_dir": str(context.data_dir)},
        "ddns": {"zone": context.test_zone, "server": context.test_server},
        "default_provider": "mock",
        "dns_providers": {"mock": {"fail": False}},
    }
    context.tokens = {}
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    shutil.rmtree(context.data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")
