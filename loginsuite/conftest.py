"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers markers, initializes logging and tags tests by directory.

================================================================================
"""

import pytest

from loginsuite.common import PROJECT_ROOT, ConfigLoader, init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: Browser tests against the live login page"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )

    suite_config = ConfigLoader()
    init_logger(
        level=suite_config.get("logging.level", "INFO"),
        log_file=_log_file(suite_config.get("logging.file")),
        rotation=suite_config.get("logging.rotation", "10 MB"),
        retention=suite_config.get("logging.retention", "7 days"),
    )


def _log_file(path):
    """Resolve a relative log file path against the project root."""
    if not path:
        return None
    return str(PROJECT_ROOT / path)


def pytest_collection_modifyitems(config, items):
    """Auto-add directory markers."""
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)
