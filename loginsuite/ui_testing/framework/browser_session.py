"""
================================================================================
Browser Session
================================================================================

Browser lifecycle management for UI automation.

A BrowserSession owns one Playwright browser, its context and page, plus
the WaitPolicy every element interaction on that page is bounded by.
Sessions are created per test case and closed unconditionally afterwards.

Features:
    - Browser configuration presets (chromium, firefox, webkit)
    - Maximized viewport for visual consistency
    - Fixed explicit-wait policy applied to the page
    - Idempotent close, usable as a context manager

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from .errors import SessionStartError


DEFAULT_BASE_URL = "https://the-internet.herokuapp.com"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class WaitPolicy:
    """
    Bounded-timeout waiting strategy used for every element interaction.

    Attributes:
        timeout_seconds: Maximum time to wait for an element condition
    """
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("Wait timeout must be positive")

    @property
    def timeout_ms(self) -> float:
        """Timeout in milliseconds, as Playwright expects it."""
        return self.timeout_seconds * 1000


@dataclass(frozen=True)
class BrowserSettings:
    """Launch and context options for a browser session."""
    browser_type: str = "chromium"
    headless: bool = True
    maximize: bool = True
    viewport_width: int = 1920
    viewport_height: int = 1080
    navigation_timeout_seconds: float = 30.0
    launch_args: Tuple[str, ...] = ("--ignore-certificate-errors",)

    def __post_init__(self) -> None:
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser: {self.browser_type}. "
                f"Expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )

    @classmethod
    def from_config(cls, config: Any) -> "BrowserSettings":
        """
        Build settings from a ConfigLoader-like object exposing get(key, default).
        """
        return cls(
            browser_type=config.get("ui.browser", "chromium"),
            headless=config.get("ui.headless", True),
            maximize=config.get("ui.maximize", True),
            viewport_width=config.get("ui.viewport.width", 1920),
            viewport_height=config.get("ui.viewport.height", 1080),
            navigation_timeout_seconds=config.get("ui.navigation_timeout", 30.0),
        )

    def launch_options(self) -> Dict[str, Any]:
        args = list(self.launch_args)
        # Window maximization only exists for headed chromium
        if self._native_maximize:
            args.append("--start-maximized")
        return {"headless": self.headless, "args": args}

    def context_options(self) -> Dict[str, Any]:
        if self._native_maximize:
            return {"no_viewport": True, "ignore_https_errors": True}
        return {
            "viewport": {"width": self.viewport_width, "height": self.viewport_height},
            "ignore_https_errors": True,
        }

    @property
    def _native_maximize(self) -> bool:
        return self.maximize and not self.headless and self.browser_type == "chromium"


class BrowserSession:
    """
    One live browser plus its WaitPolicy, owned by a single test case.

    Usage:
        with BrowserSession(BrowserSettings(), WaitPolicy(10)) as session:
            session.page.goto("https://the-internet.herokuapp.com/login")

        # Or explicitly
        session = BrowserSession().start()
        try:
            ...
        finally:
            session.close()
    """

    def __init__(
        self,
        settings: Optional[BrowserSettings] = None,
        wait_policy: Optional[WaitPolicy] = None,
        base_url: str = DEFAULT_BASE_URL,
        log=None,
    ):
        """
        Initialize browser session.

        Args:
            settings: Browser launch/context settings
            wait_policy: Explicit wait applied to every interaction
            base_url: Base URL of the application under test
            log: Logger to use; defaults to a loguru logger bound to this component
        """
        self.settings = settings or BrowserSettings()
        self.wait_policy = wait_policy or WaitPolicy()
        self.base_url = base_url.rstrip("/")
        self.log = log or logger.bind(component="BrowserSession")

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    def __enter__(self) -> "BrowserSession":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> "BrowserSession":
        """
        Start Playwright, launch the browser and open a maximized page.

        Raises:
            SessionStartError: If any step of the browser start fails
        """
        if self.is_active:
            raise RuntimeError("Browser session already started")

        started = False
        try:
            self._playwright = sync_playwright().start()
            launcher = getattr(self._playwright, self.settings.browser_type)
            self._browser = launcher.launch(**self.settings.launch_options())
            self._context = self._browser.new_context(**self.settings.context_options())
            self._page = self._context.new_page()
            started = True
        except PlaywrightError as e:
            self.log.error(f"Failed to start {self.settings.browser_type} browser: {e}")
            raise SessionStartError(
                f"Could not start {self.settings.browser_type} browser session: {e}"
            ) from e
        finally:
            if not started:
                self.close()

        self._page.set_default_timeout(self.wait_policy.timeout_ms)
        self._page.set_default_navigation_timeout(
            self.settings.navigation_timeout_seconds * 1000
        )
        self.log.info(
            f"Browser session started: {self.settings.browser_type} "
            f"(headless={self.settings.headless}, "
            f"wait={self.wait_policy.timeout_seconds}s)"
        )
        return self

    def close(self) -> None:
        """
        Close page, context and browser, then stop Playwright.

        Safe to call more than once and on a session that never started.
        """
        if self._context is None and self._browser is None and self._playwright is None:
            return

        try:
            self._release("context", self._context.close if self._context else None)
        finally:
            try:
                self._release("browser", self._browser.close if self._browser else None)
            finally:
                try:
                    self._release("playwright", self._playwright.stop if self._playwright else None)
                finally:
                    self._page = None
                    self._context = None
                    self._browser = None
                    self._playwright = None
                    self.log.info("Browser session closed")

    def _release(self, name: str, closer) -> None:
        # Driver errors while closing are logged; anything else propagates
        if closer is None:
            return
        try:
            closer()
        except PlaywrightError as e:
            self.log.warning(f"Failed to close {name}: {e}")

    @property
    def is_active(self) -> bool:
        return self._page is not None

    @property
    def page(self) -> Page:
        """Get the live page. Fails if the session is not started."""
        if self._page is None:
            raise RuntimeError("Browser session not started. Call start() first.")
        return self._page

    @property
    def current_url(self) -> str:
        return self.page.url

    def screenshot(self, full_page: bool = True) -> bytes:
        """Capture the current page as PNG bytes."""
        return self.page.screenshot(full_page=full_page)


__all__ = [
    "BrowserSession",
    "BrowserSettings",
    "WaitPolicy",
    "DEFAULT_BASE_URL",
    "SUPPORTED_BROWSERS",
]
