"""
================================================================================
Test Data Provider
================================================================================

Loads environment-specific login test data from a flat ``key=value`` file.

Recognized keys:
    valid.username, valid.password,
    invalid.username, invalid.password,
    expected.success.message,
    expected.invalid.username.message,
    expected.invalid.password.message

Parsing is permissive: unknown keys are ignored and missing keys stay None.
A source that cannot be read at all raises ConfigLoadError.

Each key can be overridden from the environment, e.g.
``TESTDATA_VALID_PASSWORD`` overrides ``valid.password``.

================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from .errors import ConfigLoadError


ENV_OVERRIDE_PREFIX = "TESTDATA_"

# file key -> TestData field
KEY_MAP: Dict[str, str] = {
    "valid.username": "valid_username",
    "valid.password": "valid_password",
    "invalid.username": "invalid_username",
    "invalid.password": "invalid_password",
    "expected.success.message": "expected_success_message",
    "expected.invalid.username.message": "expected_invalid_username_message",
    "expected.invalid.password.message": "expected_invalid_password_message",
}


@dataclass(frozen=True)
class TestData:
    """Read-only bundle of credentials and expected feedback messages."""

    __test__ = False  # not a pytest test class

    valid_username: Optional[str] = None
    valid_password: Optional[str] = None
    invalid_username: Optional[str] = None
    invalid_password: Optional[str] = None
    expected_success_message: Optional[str] = None
    expected_invalid_username_message: Optional[str] = None
    expected_invalid_password_message: Optional[str] = None
    source: Optional[Path] = None

    def missing_keys(self) -> list:
        """File keys that were absent from the source."""
        return [key for key, name in KEY_MAP.items() if getattr(self, name) is None]

    def __repr__(self) -> str:
        values = ", ".join(
            f"{f.name}={'****' if 'password' in f.name and getattr(self, f.name) else getattr(self, f.name)!r}"
            for f in fields(self)
        )
        return f"TestData({values})"


def load_test_data(source: Union[str, Path]) -> TestData:
    """
    Load test data from a ``key=value`` file.

    Args:
        source: Path to the properties file

    Returns:
        TestData with every recognized key found in the source

    Raises:
        ConfigLoadError: The source is missing, unreadable or not UTF-8 text
    """
    path = Path(source)
    if not path.is_file():
        raise ConfigLoadError(f"Test data file not found: {path}")

    try:
        raw = _read_properties(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Unable to read test data file {path}: {e}") from e

    values: Dict[str, Any] = {}
    for key, name in KEY_MAP.items():
        env_key = ENV_OVERRIDE_PREFIX + key.upper().replace(".", "_")
        value = os.environ.get(env_key, raw.get(key))
        if value is not None:
            values[name] = value

    data = TestData(source=path, **values)
    missing = data.missing_keys()
    if missing:
        logger.warning(f"Test data {path} is missing keys: {', '.join(missing)}")
    logger.debug(f"Loaded test data from: {path}")
    return data


def _read_properties(path: Path) -> Dict[str, str]:
    """
    Parse ``key=value`` lines. Values are kept verbatim after the first ``=``:
    no quote stripping, no inline comments, trailing whitespace preserved.
    Blank lines, ``#``/``!`` comment lines and lines without ``=`` are skipped.
    """
    entries: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            stripped = line.lstrip()
            if not stripped or stripped[0] in "#!" or "=" not in stripped:
                continue
            key, value = stripped.split("=", 1)
            entries[key.strip()] = value
    return entries


def resolve_test_data_path(config: Any, project_root: Path) -> Path:
    """
    Work out which test data file to load.

    ``test_data.path`` wins when set; otherwise the file is
    ``<test_data.dir>/<environment>.properties`` where the environment comes
    from ``test_data.environment`` or the ENVIRONMENT variable.
    """
    explicit = config.get("test_data.path")
    if explicit:
        path = Path(explicit)
    else:
        environment = os.getenv("ENVIRONMENT") or config.get("test_data.environment", "dev")
        directory = Path(config.get("test_data.dir", "config/testdata"))
        path = directory / f"{environment}.properties"

    if not path.is_absolute():
        path = project_root / path
    return path


__all__ = [
    "TestData",
    "KEY_MAP",
    "load_test_data",
    "resolve_test_data_path",
]
