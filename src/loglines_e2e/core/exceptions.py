"""Loglines E2E exception hierarchy.

Setup failures raised from the page object propagate to pytest and fail
the test before its body runs.
"""


class LoglinesE2EError(Exception):
    """Base exception for all Loglines E2E errors."""

    pass


class ConfigurationError(LoglinesE2EError):
    """Raised when E2E configuration is invalid or missing.

    Example:
        raise ConfigurationError("KEYCLOAK_BASE_URL has no host")
    """

    pass


class LoginNavigationError(LoglinesE2EError):
    """Raised when the Keycloak login page cannot be opened.

    Example:
        raise LoginNavigationError("Keycloak responded 503 for login URL")
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class LoginRedirectError(LoglinesE2EError):
    """Raised when the post-login redirect does not leave Keycloak in time."""

    def __init__(self, message: str, timeout_ms: float, url: str) -> None:
        super().__init__(message)
        self.timeout_ms = timeout_ms
        self.url = url
