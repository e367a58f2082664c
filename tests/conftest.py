"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so the tests import the
E164Lookup package and the scripts/ helpers without an install.
"""

import json
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def table_file(tmp_path):
    """Writes a list of rows as a prefix table and returns its path."""

    def _write(rows):
        path = tmp_path / "prefixes.json"
        path.write_text(json.dumps(rows), encoding="utf-8")
        return str(path)

    return _write
