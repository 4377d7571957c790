# tsplib_parser/tests/conftest.py
import random
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

from tsplib_parser.app import app

# Base directories
ROOT = Path(__file__).resolve().parents[2]        # repository root
EXAMPLES_DIR = ROOT / "examples"

MINIMAL_LINES = [
    "NAME: test",
    "TYPE: TSP",
    "COMMENT: Test",
    "DIMENSION: 3",
    "EDGE_WEIGHT_TYPE: GEO",
    "DISPLAY_DATA_TYPE: COORD_DISPLAY",
    "NODE_COORD_SECTION",
    "1 38.24 20.42",
    "2 39.57 26.15",
    "3 40.56 25.32",
    "EOF",
]


@pytest.fixture(scope="session")
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="session")
def examples():
    """Map of sample file name -> path, from the examples/ folder."""
    if not EXAMPLES_DIR.exists():
        raise FileNotFoundError(f"{EXAMPLES_DIR} not found.")
    return {p.name: p for p in EXAMPLES_DIR.iterdir() if p.is_file()}


@pytest.fixture
def minimal_text():
    return "\n".join(MINIMAL_LINES) + "\n"


@pytest.fixture
def without():
    """Minimal text with every line starting with one of `keys` removed."""
    def _without(*keys):
        return "\n".join(l for l in MINIMAL_LINES if not l.startswith(keys)) + "\n"
    return _without


@pytest.fixture
def rng():
    return random.Random(1234)
