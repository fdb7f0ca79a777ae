"""
Local file storage for documents, manifests and noise-word lists

Handles all disk reads for the search engine:
- Document manifest: names of documents to index, whitespace separated
- Noise-word list: one word per token, case-insensitive
- Documents: plain text, read line by line and split on whitespace

Layout (names in the manifest are resolved against base_dir):
base_dir/
├── docs.txt             # "doc1.txt doc2.txt ..."
├── noisewords.txt       # "a an the of ..."
├── doc1.txt
└── doc2.txt

The index and query code never touch the filesystem; every I/O failure is
raised from here as ResourceNotFoundError.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def tokenize_line(line: str) -> List[str]:
    """Split one line of a document into whitespace-delimited tokens"""
    return line.split()


class ResourceNotFoundError(FileNotFoundError):
    """Document, manifest or noise-word file could not be opened"""

    def __init__(self, path: PathLike, reason: str = "not found"):
        self.path = str(path)
        super().__init__(f"Resource {reason}: {self.path}")


class DocumentStorage:
    """Filesystem reader for search engine inputs"""

    def __init__(self, base_dir: Optional[PathLike] = None, encoding: str = "utf-8"):
        """
        Args:
            base_dir: Directory relative names are resolved against
                (default: current working directory)
            encoding: Text encoding of all input files
        """
        self.base_dir = Path(base_dir) if base_dir else None
        self.encoding = encoding

    def resolve(self, name: PathLike) -> Path:
        """Resolve a manifest entry or file argument to a path"""
        path = Path(name)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def _open(self, name: PathLike):
        path = self.resolve(name)
        try:
            # Undecodable bytes become U+FFFD, which the keyword test rejects
            return open(path, "r", encoding=self.encoding, errors="replace")
        except FileNotFoundError as e:
            raise ResourceNotFoundError(path) from e
        except (IsADirectoryError, PermissionError) as e:
            raise ResourceNotFoundError(path, reason="not readable") from e

    def _read_words(self, name: PathLike) -> List[str]:
        with self._open(name) as f:
            return f.read().split()

    def read_manifest(self, docs_file: PathLike) -> List[str]:
        """
        Read the list of document names to index.

        Returns:
            Document names in manifest order
        """
        names = self._read_words(docs_file)
        logger.debug(f"Manifest {docs_file}: {len(names)} documents")
        return names

    def read_noise_words(self, noise_words_file: PathLike) -> List[str]:
        """Read the noise-word list (lower-cased)"""
        words = [w.lower() for w in self._read_words(noise_words_file)]
        logger.debug(f"Noise words {noise_words_file}: {len(words)} words")
        return words

    def iter_document_tokens(self, doc_file: PathLike) -> Iterator[str]:
        """
        Iterate over the whitespace-delimited tokens of a document in reading order.

        The file is read and closed before this returns, so a missing document
        fails on the call and no handle outlives it.

        Raises:
            ResourceNotFoundError: If the document cannot be opened
        """
        tokens: List[str] = []
        with self._open(doc_file) as f:
            for line in f:
                tokens.extend(tokenize_line(line))
        return iter(tokens)
