"""
Page Objects

Page Object Model (POM) for the Loglines authentication flow.
Encapsulates page interactions and locators.

Usage:
    from loglines_e2e.pages import KeycloakLoginPage

    login_page = KeycloakLoginPage(page)
    login_page.navigate_to_login(auth_url)
    login_page.login("user", "secret")

Pattern:
    - One class per page/major component
    - Methods for actions (navigate, fill, click)
    - Properties for locators
"""

from loglines_e2e.pages.keycloak_login_page import KeycloakLoginPage

__all__ = ["KeycloakLoginPage"]
