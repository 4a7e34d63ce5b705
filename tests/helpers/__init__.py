"""Test helpers for pgnumeric."""

from tests.helpers.factories import negative, positive
from tests.helpers.fixtures import FIXTURES_DIR, load_numeric_cases

__all__ = ["positive", "negative", "load_numeric_cases", "FIXTURES_DIR"]
