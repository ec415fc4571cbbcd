"""Playwright E2E configuration for the Loglines login flow.

This module provides fixtures for:
- Browser launch and context arguments driven by Settings
- structlog configuration for the live session

Usage:
    pytest -m e2e tests/e2e
    HEADED=1 SLOW_MO=200 pytest -m e2e tests/e2e
"""

from typing import Any

import pytest

from loglines_e2e.config import get_settings
from loglines_e2e.config.logging import configure_logging

# =============================================================================
# Session Setup
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def e2e_logging() -> None:
    """Configure structlog once for the live browser session."""
    configure_logging()


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for the Loglines front end."""
    settings = get_settings()
    return {
        **browser_context_args,
        "viewport": {"width": settings.viewport_width, "height": settings.viewport_height},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    settings = get_settings()
    return {
        **browser_type_launch_args,
        "headless": not settings.headed,
        "slow_mo": settings.slow_mo,
    }
