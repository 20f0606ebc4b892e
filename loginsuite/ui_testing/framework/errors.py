"""
================================================================================
UI Framework Errors
================================================================================

Exception hierarchy raised by the UI framework.

    UIFrameworkError
        - InteractionTimeout: wait-bounded condition not met in time
        - InteractionError: any other browser driver failure
        - ConfigLoadError: test data / suite configuration unreadable
        - SessionStartError: browser session could not be created

================================================================================
"""

from __future__ import annotations

from typing import Optional


class UIFrameworkError(Exception):
    """Base class for all UI framework errors."""
    pass


class InteractionTimeout(UIFrameworkError):
    """Raised when an element did not reach the awaited state in time."""

    def __init__(self, action: str, locator: object, timeout_ms: Optional[float] = None):
        self.action = action
        self.locator = locator
        self.timeout_ms = timeout_ms
        message = f"Timed out waiting to {action} element: {locator}"
        if timeout_ms is not None:
            message += f" (after {timeout_ms:.0f}ms)"
        super().__init__(message)


class InteractionError(UIFrameworkError):
    """Raised on non-timeout driver failures (stale element, strict mode, ...)."""

    def __init__(self, action: str, locator: object, reason: str = ""):
        self.action = action
        self.locator = locator
        self.reason = reason
        message = f"Failed to {action} element: {locator}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class ConfigLoadError(UIFrameworkError):
    """Raised when a configuration or test data source cannot be loaded."""
    pass


class SessionStartError(UIFrameworkError):
    """Raised when the browser session could not be started."""
    pass


__all__ = [
    "UIFrameworkError",
    "InteractionTimeout",
    "InteractionError",
    "ConfigLoadError",
    "SessionStartError",
]
