"""
Entry point - Runs every demonstration once, in order.

This module configures logging from settings, builds the adapters
and runs the demonstrations against them.
"""

import logging

from src.config.settings import get_settings
from src.domain.ports import OutputSink
from src.domain.registry import UserRepository
from src.runner.demos import (
    division_demo,
    email_validation_demo,
    immutable_user_demo,
    null_safety_demo,
    user_registry_demo,
)
from src.runner.dependencies import get_output_sink, get_user_repository

logger = logging.getLogger(__name__)


def run_demos(output: OutputSink, repository: UserRepository) -> None:
    """Run the five demonstrations in their fixed order."""
    null_safety_demo(output)
    email_validation_demo(output)
    immutable_user_demo(output)
    division_demo(output)
    user_registry_demo(output, repository)


def main() -> int:
    """
    Console entry point.

    Returns:
        Process exit status
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Running demonstrations...")
    run_demos(get_output_sink(), get_user_repository())
    logger.info("Demonstrations complete")
    return 0
