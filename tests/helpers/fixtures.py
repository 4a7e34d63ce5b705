"""Loading of JSON numeric fixture files."""

import json
from pathlib import Path

from pgnumeric.models import NumericCase

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
NUMERIC_DIR = FIXTURES_DIR / "numeric"


def load_numeric_cases(name: str) -> list[NumericCase]:
    """Load a list of numeric cases by fixture name.

    Args:
        name: Fixture name (e.g., "encode_cases")

    Returns:
        Parsed NumericCase list
    """
    path = NUMERIC_DIR / f"{name}.json"
    with open(path) as f:
        data = json.load(f)
    return [NumericCase.model_validate(item) for item in data]
