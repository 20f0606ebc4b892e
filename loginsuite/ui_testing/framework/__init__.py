"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based Page Object Model framework.

Components:
    - locators: Immutable element descriptors
    - browser_session: Browser session + wait policy lifecycle
    - page_base: Base page object with wait-bounded interactions
    - testdata: key=value test data loading
    - lifecycle: Per-test-case session and data ownership
    - errors: Framework exception hierarchy

Author: Automation Team
License: MIT
================================================================================
"""

from .errors import (
    ConfigLoadError,
    InteractionError,
    InteractionTimeout,
    SessionStartError,
    UIFrameworkError,
)
from .locators import ElementLocator
from .browser_session import BrowserSession, BrowserSettings, WaitPolicy
from .page_base import BasePage
from .testdata import TestData, load_test_data, resolve_test_data_path
from .lifecycle import LifecycleState, TestLifecycle

__all__ = [
    "BasePage",
    "BrowserSession",
    "BrowserSettings",
    "ConfigLoadError",
    "ElementLocator",
    "InteractionError",
    "InteractionTimeout",
    "LifecycleState",
    "SessionStartError",
    "TestData",
    "TestLifecycle",
    "UIFrameworkError",
    "WaitPolicy",
    "load_test_data",
    "resolve_test_data_path",
]
