"""Unit tests for scripts/search_docs.py"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "search_docs.py"


@pytest.fixture(scope="module")
def search_docs():
    """Load the script as a module (scripts/ is not a package)"""
    spec = importlib.util.spec_from_file_location("search_docs", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSearchDocsScript:

    def test_search(self, search_docs, fixtures_dir, capsys):
        exit_code = search_docs.main([
            str(fixtures_dir / "docs.txt"),
            str(fixtures_dir / "noisewords.txt"),
            "deep",
            "world",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "1. wowch1.txt",
            "2. doc1.txt",
            "3. poems.txt",
            "4. doc2.txt",
        ]

    def test_no_match(self, search_docs, fixtures_dir, capsys):
        exit_code = search_docs.main([
            str(fixtures_dir / "docs.txt"),
            str(fixtures_dir / "noisewords.txt"),
            "x",
            "y",
        ])

        assert exit_code == 0
        assert "No matching documents." in capsys.readouterr().out

    def test_keyword_mode(self, search_docs, fixtures_dir, capsys):
        exit_code = search_docs.main([
            "--keyword",
            str(fixtures_dir / "docs.txt"),
            str(fixtures_dir / "noisewords.txt"),
            "we're",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "None"

    def test_usage(self, search_docs, capsys):
        assert search_docs.main(["docs.txt"]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_missing_files(self, search_docs, tmp_path, capsys):
        exit_code = search_docs.main([
            str(tmp_path / "docs.txt"),
            str(tmp_path / "noisewords.txt"),
            "deep",
            "world",
        ])

        assert exit_code == 1
        assert "Resource not found" in capsys.readouterr().err
