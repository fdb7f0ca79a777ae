"""Unit test configuration"""

import os

import pytest

# CRITICAL: Set env vars BEFORE importing littlesearch.main
# main.py configures logging at module level (on import)
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from littlesearch.engine import LittleSearchEngine
from littlesearch.storage import DocumentStorage


@pytest.fixture
def fixture_engine(fixtures_dir):
    """LittleSearchEngine built from tests/fixtures/documents"""
    engine = LittleSearchEngine(storage=DocumentStorage(base_dir=fixtures_dir))
    engine.make_index("docs.txt", "noisewords.txt")
    return engine
