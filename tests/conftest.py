"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from pgnumeric.models import NumericCase
from tests.helpers import FIXTURES_DIR, load_numeric_cases


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def encode_cases() -> list[NumericCase]:
    """All Decimal -> wire fixture cases."""
    return load_numeric_cases("encode_cases")


@pytest.fixture
def decode_cases() -> list[NumericCase]:
    """All wire -> Decimal fixture cases."""
    return load_numeric_cases("decode_cases")


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()
