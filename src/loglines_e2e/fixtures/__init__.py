"""
Test Fixtures Package

Reusable fixtures for the Keycloak login flow:
- test_data.py: static credentials and the authorization URL
- auth_fixtures.py: pytest plugin with keycloak_login_page, test_data
  and authenticated_page

Usage:
    # conftest.py
    pytest_plugins = ["loglines_e2e.fixtures.auth_fixtures"]

Pattern:
    1. Plain functions for logic (testable without Playwright)
    2. Fixtures for dependency injection
    3. Composition via pytest fixture dependencies
"""

from loglines_e2e.fixtures.test_data import Credentials, LoginTestData, build_test_data

__all__ = ["Credentials", "LoginTestData", "build_test_data"]
