#!/usr/bin/env python3
"""
Build a keyword index from local files and run one top-5 search.

Usage:
    python scripts/search_docs.py DOCS_FILE NOISE_WORDS_FILE KW1 KW2
    python scripts/search_docs.py --keyword DOCS_FILE NOISE_WORDS_FILE WORD

Document names in DOCS_FILE are resolved relative to the directory of DOCS_FILE.
"""

import logging
import sys
from pathlib import Path

# Allow running from a checkout without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from littlesearch.engine import LittleSearchEngine
from littlesearch.logging_config import setup_logging
from littlesearch.storage import DocumentStorage, ResourceNotFoundError


def build_engine(docs_file: str, noise_words_file: str) -> LittleSearchEngine:
    """Index every document listed in docs_file."""
    docs_path = Path(docs_file)
    engine = LittleSearchEngine(storage=DocumentStorage(base_dir=docs_path.parent))
    engine.make_index(docs_path.name, Path(noise_words_file).resolve())
    return engine


def print_usage() -> None:
    print("Usage:")
    print("  python scripts/search_docs.py DOCS_FILE NOISE_WORDS_FILE KW1 KW2")
    print("  python scripts/search_docs.py --keyword DOCS_FILE NOISE_WORDS_FILE WORD")
    print("\nExamples:")
    print("  python scripts/search_docs.py docs.txt noisewords.txt deep world")
    print("  python scripts/search_docs.py --keyword docs.txt noisewords.txt \"we're\"")


def main(argv=None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging(log_file=None, console_level=logging.WARNING)

    keyword_mode = bool(args) and args[0] == "--keyword"
    if keyword_mode:
        args = args[1:]

    if len(args) != (3 if keyword_mode else 4):
        print_usage()
        return 1

    try:
        engine = build_engine(args[0], args[1])
    except ResourceNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if keyword_mode:
        print(engine.get_keyword(args[2]))
        return 0

    results = engine.top5search(args[2], args[3])
    if not results:
        print("No matching documents.")
    else:
        for rank, document in enumerate(results, start=1):
            print(f"{rank}. {document}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
