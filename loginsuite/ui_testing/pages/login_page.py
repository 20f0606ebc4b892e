"""
================================================================================
Login Page Object
================================================================================

Page object for https://the-internet.herokuapp.com/login.

The page shows one feedback banner (#flash) for both outcomes of a login
attempt. Whether the attempt succeeded is told by the banner text, never by
its presence alone:

    success          -> "You logged into a secure area!"
    unknown username -> "Your username is invalid!"
    wrong password   -> "Your password is invalid!"

================================================================================
"""

from __future__ import annotations

import allure

from loginsuite.ui_testing.framework.locators import ElementLocator
from loginsuite.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/login"

    USERNAME_FIELD = ElementLocator.by_id("username")
    PASSWORD_FIELD = ElementLocator.by_id("password")
    # Submit button has no id, only a class
    LOGIN_BUTTON = ElementLocator.by_css("button.radius")
    # Shared by success and error feedback
    FEEDBACK_BANNER = ElementLocator.by_id("flash")

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page and return self for chaining."""
        self.navigate()
        return self

    def submit_credentials(self, username: str, password: str) -> None:
        """
        Fill in the login form and submit it.

        Assumes the form is present; if it is not, the underlying type/click
        raise InteractionTimeout.
        """
        with allure.step(f"Login (username={username})"):
            self.log.info(f"Attempting login with username: [{username}], password: [****]")
            self.type(self.USERNAME_FIELD, username)
            self.type(self.PASSWORD_FIELD, password)
            self.click(self.LOGIN_BUTTON)

    @allure.step("Verify login form is displayed")
    def is_ready(self) -> bool:
        """True only if username field, password field and submit button are visible."""
        for locator in (self.USERNAME_FIELD, self.PASSWORD_FIELD, self.LOGIN_BUTTON):
            if not self.is_visible(locator):
                self.log.warning(f"Login page not ready, missing: {locator}")
                return False
        return True

    def has_feedback_message(self) -> bool:
        """True if the feedback banner (success or error) is visible."""
        return self.is_visible(self.FEEDBACK_BANNER)

    def feedback_message_text(self) -> str:
        """
        Trimmed text of the feedback banner.

        Raises:
            InteractionTimeout: The banner never became visible
        """
        text = self.get_text(self.FEEDBACK_BANNER)
        self.log.info(f"Login message appeared: '{text}'")
        return text


__all__ = [
    "LoginPage",
]
