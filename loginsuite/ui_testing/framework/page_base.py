"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides the only sanctioned way page code touches the DOM. Every primitive
is bounded by the session's WaitPolicy, opens an Allure step and logs the
locator together with the outcome.

    click       - wait until actionable, click
    type        - wait until visible, clear, fill
    get_text    - wait until visible, return stripped visible text
    is_visible  - wait until visible, True/False (timeouts never raise)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import allure
from loguru import logger
from playwright.sync_api import (
    Error as PlaywrightError,
    Locator,
    TimeoutError as PlaywrightTimeoutError,
)

from .browser_session import BrowserSession
from .errors import InteractionError, InteractionTimeout
from .locators import ElementLocator


def _mask(locator: ElementLocator, value: str) -> str:
    """Hide values typed into password fields."""
    if "password" in locator.value.lower():
        return "*" * len(value)
    return value


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"
            USERNAME_FIELD = ElementLocator.by_id("username")

            def enter_username(self, username: str) -> None:
                self.type(self.USERNAME_FIELD, username)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, session: BrowserSession, base_url: str = "", log=None):
        """
        Initialize page object.

        Args:
            session: Live browser session (referenced, not owned)
            base_url: Base URL override; defaults to the session's base URL
            log: Logger to use; defaults to a loguru logger bound to the page class
        """
        self.session = session
        self.wait = session.wait_policy
        self.base_url = (base_url or session.base_url).rstrip("/")
        self.log = log or logger.bind(component=type(self).__name__)

    @property
    def page(self):
        return self.session.page

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self) -> None:
        """Navigate to this page."""
        self.navigate_to(self.URL_PATH)

    def navigate_to(self, path: str) -> None:
        """
        Navigate to a path below the base URL.

        No retry and no readiness check beyond the browser's load event.
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            with self._interaction("navigate to", full_url, bounded=False):
                self.page.goto(full_url)
            self.log.info(f"Navigated to: {full_url}")

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def click(self, locator: ElementLocator) -> None:
        """
        Click an element once it is visible and clickable.

        Raises:
            InteractionTimeout: Element not actionable within the wait policy
            InteractionError: Any other driver failure
        """
        with allure.step(f"Click: {locator}"):
            with self._interaction("click", locator):
                self._element(locator).click(timeout=self.wait.timeout_ms)
            self.log.info(f"Clicked element: {locator}")

    def type(self, locator: ElementLocator, value: str) -> None:
        """
        Clear an input and type the given value into it.

        Raises:
            InteractionTimeout: Element not visible within the wait policy
            InteractionError: Any other driver failure
        """
        shown = _mask(locator, value)
        with allure.step(f"Type into {locator}: {shown}"):
            with self._interaction("type into", locator):
                element = self._element(locator)
                element.wait_for(state="visible", timeout=self.wait.timeout_ms)
                element.clear(timeout=self.wait.timeout_ms)
                element.fill(value, timeout=self.wait.timeout_ms)
            self.log.info(f"Typed '{shown}' into element: {locator}")

    def get_text(self, locator: ElementLocator) -> str:
        """
        Get the trimmed visible text of an element.

        Raises:
            InteractionTimeout: Element not visible within the wait policy
            InteractionError: Any other driver failure
        """
        with allure.step(f"Get text: {locator}"):
            with self._interaction("get text from", locator):
                element = self._element(locator)
                element.wait_for(state="visible", timeout=self.wait.timeout_ms)
                text = element.inner_text(timeout=self.wait.timeout_ms).strip()
            self.log.info(f"Retrieved text '{text}' from element: {locator}")
            return text

    def is_visible(self, locator: ElementLocator) -> bool:
        """
        Check whether an element becomes visible within the wait policy.

        A timeout is a negative answer, not an error. Other driver failures
        still raise InteractionError.
        """
        with allure.step(f"Is visible: {locator}"):
            try:
                self._element(locator).wait_for(
                    state="visible", timeout=self.wait.timeout_ms
                )
            except PlaywrightTimeoutError:
                self.log.warning(f"Element not visible (timeout): {locator}")
                return False
            except PlaywrightError as e:
                self.log.error(f"Failed to check visibility of: {locator} ({e.message})")
                raise InteractionError("check visibility of", locator, e.message) from e
            self.log.info(f"Element is visible: {locator}")
            return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _element(self, locator: ElementLocator) -> Locator:
        return self.page.locator(locator.selector)

    @contextmanager
    def _interaction(
        self,
        action: str,
        target: object,
        bounded: bool = True,
    ) -> Iterator[None]:
        """Translate Playwright failures into framework errors."""
        try:
            yield
        except PlaywrightTimeoutError as e:
            self.log.error(f"Timed out trying to {action}: {target}")
            timeout_ms = self.wait.timeout_ms if bounded else None
            raise InteractionTimeout(action, target, timeout_ms) from e
        except PlaywrightError as e:
            self.log.error(f"Failed to {action}: {target} ({e.message})")
            raise InteractionError(action, target, e.message) from e


__all__ = [
    "BasePage",
]
