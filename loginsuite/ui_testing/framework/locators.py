"""
================================================================================
Element Locators
================================================================================

Immutable element descriptors used by page objects.

A page object declares each element once as a class attribute:

    USERNAME_FIELD = ElementLocator.by_id("username")
    LOGIN_BUTTON = ElementLocator.by_css("button.radius")

and hands it to the BasePage primitives, which resolve it through
Playwright's selector engines.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# strategy -> Playwright selector engine prefix
SELECTOR_ENGINES: Dict[str, str] = {
    "id": "id=",
    "css": "css=",
    "xpath": "xpath=",
    "text": "text=",
}


@dataclass(frozen=True)
class ElementLocator:
    """
    Describes how to find one element on a page.

    Attributes:
        strategy: Lookup strategy - 'id', 'css', 'xpath', 'name' or 'text'
        value: Strategy-specific value (the id, the CSS selector, ...)
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in SELECTOR_ENGINES and self.strategy != "name":
            raise ValueError(f"Unknown locator strategy: {self.strategy}")
        if not self.value:
            raise ValueError("Locator value must not be empty")

    @classmethod
    def by_id(cls, value: str) -> "ElementLocator":
        return cls("id", value)

    @classmethod
    def by_css(cls, value: str) -> "ElementLocator":
        return cls("css", value)

    @classmethod
    def by_xpath(cls, value: str) -> "ElementLocator":
        return cls("xpath", value)

    @classmethod
    def by_name(cls, value: str) -> "ElementLocator":
        return cls("name", value)

    @classmethod
    def by_text(cls, value: str) -> "ElementLocator":
        return cls("text", value)

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        if self.strategy == "name":
            return f"css=[name='{self.value}']"
        return f"{SELECTOR_ENGINES[self.strategy]}{self.value}"

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


__all__ = [
    "ElementLocator",
]
