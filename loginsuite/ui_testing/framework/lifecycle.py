"""
================================================================================
Test Lifecycle
================================================================================

Owns the browser session and test data around one test case.

    UNINITIALIZED --set_up()--> READY --tear_down()--> TORN_DOWN

set_up() starts a fresh session and loads test data; tear_down() closes the
session whatever the test outcome. A lifecycle instance serves exactly one
test case, so no session is ever shared or outlives its test.

Usage:
    lifecycle = TestLifecycle(session_factory, data_path)
    with lifecycle:
        LoginPage(lifecycle.session).navigate()

================================================================================
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from .browser_session import BrowserSession
from .testdata import TestData, load_test_data


class LifecycleState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    TORN_DOWN = "torn_down"


class TestLifecycle:
    """Per-test-case session and test data owner."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        session_factory: Callable[[], BrowserSession],
        data_source: Union[str, Path],
        data_loader: Callable[[Union[str, Path]], TestData] = load_test_data,
        log=None,
    ):
        """
        Args:
            session_factory: Builds an unstarted BrowserSession
            data_source: Test data file loaded during set_up
            data_loader: Function turning data_source into TestData
            log: Logger to use; defaults to a loguru logger bound to this component
        """
        self._session_factory = session_factory
        self._data_source = data_source
        self._data_loader = data_loader
        self.log = log or logger.bind(component="TestLifecycle")

        self.state = LifecycleState.UNINITIALIZED
        self._session: Optional[BrowserSession] = None
        self._test_data: Optional[TestData] = None

    def __enter__(self) -> "TestLifecycle":
        self.set_up()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.tear_down()

    def set_up(self) -> None:
        """
        Start a new session, then load test data.

        Raises:
            SessionStartError: The browser could not be started
            ConfigLoadError: Test data could not be loaded (session is closed first)
            RuntimeError: set_up() was already called on this lifecycle
        """
        if self.state is not LifecycleState.UNINITIALIZED:
            raise RuntimeError(f"Cannot set up a lifecycle in state '{self.state.value}'")

        session = self._session_factory()
        session.start()
        self._session = session

        try:
            self._test_data = self._data_loader(self._data_source)
        except Exception:
            self.log.error(f"Aborting set up, test data not loaded from {self._data_source}")
            self.tear_down()
            raise

        self.state = LifecycleState.READY
        self.log.debug("Lifecycle ready")

    def tear_down(self) -> None:
        """Close the session if there is one. Safe to call repeatedly."""
        session, self._session = self._session, None
        self._test_data = None
        if session is not None:
            session.close()
            self.log.debug("Lifecycle torn down")
        if self.state is not LifecycleState.UNINITIALIZED or session is not None:
            self.state = LifecycleState.TORN_DOWN

    @property
    def session(self) -> BrowserSession:
        if self._session is None:
            raise RuntimeError(f"No live session (state '{self.state.value}')")
        return self._session

    @property
    def test_data(self) -> TestData:
        if self._test_data is None:
            raise RuntimeError(f"No test data loaded (state '{self.state.value}')")
        return self._test_data


__all__ = [
    "LifecycleState",
    "TestLifecycle",
]
