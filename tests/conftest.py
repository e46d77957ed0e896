"""Pytest configuration and fixtures for DateTimeImmutable tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datetime_immutable can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datetime_immutable import DateTimeImmutable  # noqa: E402


@pytest.fixture
def friday() -> DateTimeImmutable:
    """Friday 2020-01-03 15:30:45 UTC."""
    return DateTimeImmutable("2020-01-03 15:30:45+00:00")


@pytest.fixture
def saturday() -> DateTimeImmutable:
    """Saturday 2020-01-04 09:00:00 UTC."""
    return DateTimeImmutable("2020-01-04 09:00:00+00:00")


@pytest.fixture
def jan_1() -> DateTimeImmutable:
    return DateTimeImmutable("2020-01-01 00:00:00+00:00")


@pytest.fixture
def jan_31() -> DateTimeImmutable:
    return DateTimeImmutable("2020-01-31 00:00:00+00:00")
