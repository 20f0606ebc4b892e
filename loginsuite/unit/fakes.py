"""
In-memory stand-ins for Playwright pages and browser sessions.

FakePage answers element waits from simple lookup tables so page objects
can be exercised without a browser.
"""

from typing import Dict, List, Optional, Set, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from loginsuite.ui_testing.framework.browser_session import WaitPolicy


class FakeElement:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    def _check(self, action: str, timeout: Optional[float]) -> None:
        self.page.calls.append((action, self.selector, timeout))
        if self.selector in self.page.errors:
            raise self.page.errors[self.selector]
        if self.selector not in self.page.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._check(f"wait_for:{state}", timeout)

    def click(self, timeout: Optional[float] = None) -> None:
        self._check("click", timeout)

    def clear(self, timeout: Optional[float] = None) -> None:
        self._check("clear", timeout)
        self.page.values[self.selector] = ""

    def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._check("fill", timeout)
        self.page.values[self.selector] = value

    def inner_text(self, timeout: Optional[float] = None) -> str:
        self._check("inner_text", timeout)
        return self.page.texts.get(self.selector, "")


class FakePage:
    def __init__(
        self,
        visible: Optional[Set[str]] = None,
        texts: Optional[Dict[str, str]] = None,
        errors: Optional[Dict[str, Exception]] = None,
    ):
        self.visible = set(visible or ())
        self.texts = dict(texts or {})
        self.errors = dict(errors or {})
        self.values: Dict[str, str] = {}
        self.calls: List[Tuple[str, str, Optional[float]]] = []
        self.url = "about:blank"
        self.goto_error: Optional[Exception] = None

    def locator(self, selector: str) -> FakeElement:
        return FakeElement(self, selector)

    def goto(self, url: str) -> None:
        self.calls.append(("goto", url, None))
        if self.goto_error is not None:
            raise self.goto_error
        self.url = url

    def screenshot(self, full_page: bool = False) -> bytes:
        return b"\x89PNG"

    def actions(self) -> List[str]:
        return [f"{action} {selector}" for action, selector, _ in self.calls]


class FakeSession:
    """Looks like a started BrowserSession."""

    def __init__(self, page: Optional[FakePage] = None, wait_seconds: float = 10.0,
                 base_url: str = "https://the-internet.herokuapp.com"):
        self.page = page or FakePage()
        self.wait_policy = WaitPolicy(wait_seconds)
        self.base_url = base_url
        self.started = 0
        self.closed = 0
        self.start_error: Optional[Exception] = None

    @property
    def is_active(self) -> bool:
        return self.started > self.closed

    def start(self) -> "FakeSession":
        if self.start_error is not None:
            raise self.start_error
        self.started += 1
        return self

    def close(self) -> None:
        if self.is_active:
            self.closed += 1


def timeout_error(message: str = "Timeout 10000ms exceeded.") -> PlaywrightTimeoutError:
    return PlaywrightTimeoutError(message)


def driver_error(message: str = "Element is not attached to the DOM") -> PlaywrightError:
    return PlaywrightError(message)
