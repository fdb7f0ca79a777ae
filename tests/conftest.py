"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

import pytest

# Add project root to path for littlesearch imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "documents"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Directory with docs.txt, noisewords.txt and the sample documents"""
    return FIXTURES_DIR
