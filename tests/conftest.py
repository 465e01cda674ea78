"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dictcase.constants import DEFAULT_ENCODING
from dictcase.filters.case_filter import CaseFilter


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def make_file(tmp_path):
    """Factory writing text (or raw bytes) to a file under tmp_path."""

    def _make(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode(DEFAULT_ENCODING)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def read_file():
    """Read a file back exactly as written, newlines untouched."""

    def _read(path: Path) -> str:
        return Path(path).read_bytes().decode(DEFAULT_ENCODING)

    return _read


@pytest.fixture
def dictionary_file(make_file):
    """Dictionary containing the single word 'go'."""
    return make_file("dict.txt", "go\n")


@pytest.fixture
def go_filter():
    """Case filter for the dictionary {'go'} with default line limit."""
    return CaseFilter({"go"})


def chunks(text: str, size: int) -> list[str]:
    """Split text into blocks of at most size characters."""
    return [text[i:i + size] for i in range(0, len(text), size)]


@pytest.fixture
def split_blocks():
    """Expose the chunks() helper as a fixture."""
    return chunks
