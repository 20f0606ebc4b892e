"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser tests against the login page.

Key Features:
- One TestLifecycle per test: fresh browser session + freshly loaded test data
- Unconditional teardown, even when the test body fails
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from functools import partial
from pathlib import Path
from typing import Generator

import allure
import pytest
from loguru import logger

from loginsuite.common import PROJECT_ROOT, ConfigLoader
from loginsuite.ui_testing.framework.browser_session import (
    DEFAULT_BASE_URL,
    BrowserSession,
    BrowserSettings,
    WaitPolicy,
)
from loginsuite.ui_testing.framework.lifecycle import TestLifecycle
from loginsuite.ui_testing.framework.testdata import TestData, resolve_test_data_path
from loginsuite.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def suite_config() -> ConfigLoader:
    """Session-scoped suite configuration (config/config.yaml + env)."""
    return ConfigLoader()


@pytest.fixture(scope="session")
def browser_settings(suite_config: ConfigLoader) -> BrowserSettings:
    return BrowserSettings.from_config(suite_config)


@pytest.fixture(scope="session")
def wait_policy(suite_config: ConfigLoader) -> WaitPolicy:
    return WaitPolicy(timeout_seconds=suite_config.get("ui.wait_timeout", 10.0))


@pytest.fixture(scope="session")
def test_data_path(suite_config: ConfigLoader) -> Path:
    """Environment-specific test data file."""
    return resolve_test_data_path(suite_config, PROJECT_ROOT)


# ================================================================================
# Lifecycle Fixtures
# ================================================================================

@pytest.fixture(scope="function")
def lifecycle(
    suite_config: ConfigLoader,
    browser_settings: BrowserSettings,
    wait_policy: WaitPolicy,
    test_data_path: Path,
) -> Generator[TestLifecycle, None, None]:
    """
    Function-scoped lifecycle fixture.

    Starts a new browser session and loads test data before the test,
    closes the session after it regardless of outcome.
    """
    session_factory = partial(
        BrowserSession,
        settings=browser_settings,
        wait_policy=wait_policy,
        base_url=suite_config.get("ui.base_url", DEFAULT_BASE_URL),
    )
    lifecycle = TestLifecycle(session_factory, test_data_path)
    lifecycle.set_up()
    try:
        yield lifecycle
    finally:
        lifecycle.tear_down()


@pytest.fixture
def session(lifecycle: TestLifecycle) -> BrowserSession:
    """The live browser session owned by the current test."""
    return lifecycle.session


@pytest.fixture
def test_data(lifecycle: TestLifecycle) -> TestData:
    """Test data loaded for the current test."""
    return lifecycle.test_data


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(session: BrowserSession) -> LoginPage:
    """
    Provides LoginPage instance.

    Use this fixture for tests that interact with the login page.
    """
    return LoginPage(session)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach a screenshot and the current URL when a UI test fails.

    The call-phase report is built before fixture teardown, so the session
    is still live here.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    session = getattr(item, "funcargs", {}).get("session")
    if session is None or not session.is_active:
        return

    try:
        allure.attach(
            session.screenshot(full_page=True),
            name="failure_screenshot",
            attachment_type=allure.attachment_type.PNG,
        )
        allure.attach(
            session.current_url,
            name="Current URL",
            attachment_type=allure.attachment_type.TEXT,
        )
    except Exception as e:
        # Log but don't fail if screenshot capture fails
        logger.warning(f"Failed to capture failure details: {e}")
