"""Configuration module for Loglines E2E.

Usage:
    from loglines_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.keycloak_host)
"""

from loglines_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
