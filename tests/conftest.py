"""Shared pytest fixtures for Loglines E2E tests.

This module provides fixtures for:
- Test environment isolation (settings cache, env vars)
- Mocked Playwright objects (page, browser, context)
- The Keycloak login fixtures under test

Usage:
    @pytest.mark.unit
    def test_something(mock_browser):
        context = mock_browser.new_context.return_value
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

pytest_plugins = ["pytester", "loglines_e2e.fixtures.auth_fixtures"]

KEYCLOAK_LOGIN_URL = "https://keycloak-dev.logistical.one/realms/lq/login-actions/authenticate"

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Isolate settings from the developer's environment.

    Clears the cached settings before and after each test and restores
    any env vars a test changed.
    """
    from loglines_e2e.config import get_settings

    original_env = os.environ.copy()
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Mock Playwright Objects
# =============================================================================


@pytest.fixture
def mock_page() -> MagicMock:
    """Mock Playwright page sitting on the Keycloak login form.

    Navigation responses are OK and locators accept fill/click.
    """
    page = MagicMock()
    page.url = KEYCLOAK_LOGIN_URL
    page.goto.return_value = MagicMock(ok=True, status=200)
    return page


@pytest.fixture
def mock_browser(mock_page: MagicMock) -> MagicMock:
    """Mock Playwright browser whose new context hands out ``mock_page``."""
    browser = MagicMock()
    context = browser.new_context.return_value
    context.new_page.return_value = mock_page
    return browser
