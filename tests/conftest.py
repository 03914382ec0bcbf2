"""
Shared pytest fixtures.

Loads JSON input documents from fixtures/json and expected CSV output from
fixtures/csv (read byte-exact, no newline translation).
"""
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def json_fixtures():
    """Input documents keyed by file stem (default, quotes, nested, defaultValue)."""
    return {
        path.stem: json.loads(path.read_text(encoding="utf-8"))
        for path in sorted((FIXTURES_DIR / "json").glob("*.json"))
    }


@pytest.fixture(scope="session")
def csv_fixtures():
    """Expected CSV output keyed by file stem."""
    fixtures = {}
    for path in sorted((FIXTURES_DIR / "csv").glob("*.csv")):
        with open(path, "r", encoding="utf-8", newline="") as f:
            fixtures[path.stem] = f.read()
    return fixtures


@pytest.fixture
def cars(json_fixtures):
    """The default car records."""
    return json_fixtures["default"]
