"""
Repository-level pytest configuration.

Why this exists:
  - Browser tests hit a public website, so they only run on request
    (`--run-e2e` or RUN_UI_E2E=1); unit tests always run offline
  - Keep behavior explicit and discoverable
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Register command line options."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run browser end-to-end tests against the live login page",
    )


def _e2e_enabled(config) -> bool:
    if config.getoption("--run-e2e"):
        return True
    return os.getenv("RUN_UI_E2E", "").lower() in ("1", "true", "yes", "on")


def pytest_collection_modifyitems(config, items):
    """Skip e2e tests unless they were asked for."""
    if _e2e_enabled(config):
        return

    skip_e2e = pytest.mark.skip(reason="browser e2e test, use --run-e2e to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Login Page Object UI Test Suite",
        "=" * 60,
        "",
    ]
