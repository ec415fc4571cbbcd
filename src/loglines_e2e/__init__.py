"""Loglines E2E - Playwright fixtures for the Keycloak login flow."""

__version__ = "0.1.0"
