"""Page object for the Keycloak login form.

Locators use the element ids of the stock Keycloak login theme.
"""

from urllib.parse import urlparse

import structlog
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from loglines_e2e.config import get_settings
from loglines_e2e.core.exceptions import (
    ConfigurationError,
    LoginNavigationError,
    LoginRedirectError,
)

log = structlog.get_logger()

# Timeouts (in milliseconds)
LOGIN_FORM_TIMEOUT = 15_000
LOGIN_REDIRECT_TIMEOUT_MS = 30_000

ERROR_SELECTOR = "#input-error, .alert-error, #kc-error-message"


class KeycloakLoginPage:
    """Keycloak login form: navigate, submit credentials, wait for redirect."""

    def __init__(self, page: Page, idp_host: str | None = None) -> None:
        self.page = page
        self.idp_host = idp_host or get_settings().keycloak_host
        if not self.idp_host:
            raise ConfigurationError("Keycloak host is empty, check KEYCLOAK_BASE_URL")

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def username_input(self) -> Locator:
        return self.page.locator("#username")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#password")

    @property
    def submit_button(self) -> Locator:
        return self.page.locator("#kc-login")

    @property
    def error_message(self) -> Locator:
        return self.page.locator(ERROR_SELECTOR).first

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def navigate_to_login(self, url: str) -> None:
        """Open the authorization URL and wait for the login form.

        Args:
            url: Full Keycloak authorization URL (opaque)

        Raises:
            LoginNavigationError: If Keycloak answers with an HTTP error status
        """
        response = self.page.goto(url)
        if response is not None and not response.ok:
            raise LoginNavigationError(
                f"Keycloak responded {response.status} for login URL",
                status=response.status,
            )

        self.username_input.wait_for(state="visible", timeout=LOGIN_FORM_TIMEOUT)
        log.debug("keycloak_login_page_opened", url=self.page.url)

    def login(self, username: str, password: str) -> None:
        """Fill the credentials and submit the form.

        Does not check the outcome; callers inspect the page afterwards.
        """
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.submit_button.click()
        log.debug("keycloak_credentials_submitted", username=username)

    def wait_for_login_redirect(self, timeout_ms: float = LOGIN_REDIRECT_TIMEOUT_MS) -> None:
        """Wait until the browser leaves the identity provider.

        Raises:
            LoginRedirectError: If still on Keycloak after timeout_ms
        """
        try:
            self.page.wait_for_url(
                lambda url: urlparse(url).netloc != self.idp_host,
                timeout=timeout_ms,
            )
        except PlaywrightTimeoutError as e:
            raise LoginRedirectError(
                f"No redirect away from {self.idp_host} within {timeout_ms}ms",
                timeout_ms=timeout_ms,
                url=self.page.url,
            ) from e

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def is_on_identity_provider(self) -> bool:
        """Check whether the page is still served by Keycloak."""
        return urlparse(self.page.url).netloc == self.idp_host

    def get_error_message(self) -> str:
        """Return the login error text, or an empty string if none is shown."""
        if self.error_message.count():
            text = self.error_message.text_content()
            return text.strip() if text else ""
        return ""

    def has_error(self) -> bool:
        """Check if Keycloak displays a login error."""
        return bool(self.get_error_message())
