"""
Little Search Engine - FastAPI application for keyword search

Serves a keyword index over a small, fixed document collection:
- Index is built once at startup from a document manifest and a noise-word list
- Queries are "kw1 OR kw2", ranked by keyword frequency, top 5 documents
- Index is read-only after startup (no uploads, no re-indexing)

Configuration (environment, .env.local or .env):
- DOCS_FILE: manifest listing document files (default: docs.txt)
- NOISE_WORDS_FILE: noise-word list (default: noisewords.txt)
- DOCS_BASE_DIR: directory the above and the documents are resolved in
- LOG_LEVEL: console log level (default: INFO)
- LOG_FILE: base log file path, empty to disable (default: logs/littlesearch.log)
- PORT: HTTP port when run directly (default: 8080)
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Load environment variables from .env.local (local dev) or .env (production)
from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    load_dotenv(env_local, override=True)
elif env_file.exists():
    load_dotenv(env_file, override=True)

# Configure logging: console (brief) + file (detailed)
from .logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
console_level = getattr(logging, log_level, logging.INFO)
setup_logging(
    log_file=os.getenv("LOG_FILE", "logs/littlesearch.log") or None,
    console_level=console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import Depends, FastAPI, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .engine import LittleSearchEngine
from .engine.ranking import TOP_N
from .storage import DocumentStorage, ResourceNotFoundError

PORT = int(os.getenv("PORT", "8080"))

# Version tracking
APP_VERSION = __version__
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

# Global instances
search_engine: Optional[LittleSearchEngine] = None
index_error: Optional[str] = None


def load_search_engine() -> LittleSearchEngine:
    """
    Build the search engine from the configured manifest and noise-word list.

    Raises:
        ResourceNotFoundError: If any input file is missing
    """
    docs_file = os.getenv("DOCS_FILE", "docs.txt")
    noise_words_file = os.getenv("NOISE_WORDS_FILE", "noisewords.txt")
    base_dir = os.getenv("DOCS_BASE_DIR") or None

    logger.info(f"Building index (docs={docs_file}, noise_words={noise_words_file}, base_dir={base_dir})...")
    engine = LittleSearchEngine(storage=DocumentStorage(base_dir=base_dir))
    engine.make_index(docs_file, noise_words_file)
    return engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the index before serving, release it on shutdown"""
    global search_engine, index_error

    try:
        search_engine = load_search_engine()
        index_error = None
        logger.info("Index built successfully")
    except ResourceNotFoundError as e:
        # Keep serving /health so the failure is visible
        search_engine = None
        index_error = str(e)
        logger.error(f"Index build failed: {e}")

    yield

    logger.info("Shutting down...")
    search_engine = None


# FastAPI app
app = FastAPI(
    title="Little Search Engine API",
    description="Top-5 two-keyword search over a keyword frequency index",
    version=APP_VERSION,
    lifespan=lifespan,
)


def get_search_engine() -> LittleSearchEngine:
    """Dependency: the built search engine, or 503 while none is available"""
    if search_engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Index not available: {index_error or 'not built'}",
        )
    return search_engine


# Request/Response models
class IndexStats(BaseModel):
    documents: int
    keywords: int
    noise_words: int


class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    index: Optional[IndexStats] = None
    error: Optional[str] = None


class SearchResponse(BaseModel):
    kw1: str
    kw2: str
    results: List[str] = Field(..., description=f"Document names, highest frequency first (max {TOP_N})")
    total: int


class KeywordResponse(BaseModel):
    word: str = Field(..., description="Word as given")
    keyword: Optional[str] = Field(None, description="Normalized keyword, null if rejected")
    is_keyword: bool


class OccurrenceItem(BaseModel):
    document: str
    frequency: int


class OccurrenceListResponse(BaseModel):
    keyword: str
    occurrences: List[OccurrenceItem] = Field(..., description="Descending frequency order")
    total: int


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Little Search Engine API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check; degraded when the index could not be built"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy" if search_engine is not None else "degraded",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
        index=IndexStats(**search_engine.stats()) if search_engine is not None else None,
        error=index_error,
    )


@app.get("/v1/search", response_model=SearchResponse)
async def search(
    kw1: str = Query(..., min_length=1, description="First keyword (wins frequency ties)"),
    kw2: str = Query(..., min_length=1, description="Second keyword"),
    engine: LittleSearchEngine = Depends(get_search_engine),
):
    """Top 5 documents containing kw1 or kw2"""
    results = engine.top5search(kw1, kw2)
    logger.debug(f"Search '{kw1}' OR '{kw2}': {results}")

    return SearchResponse(kw1=kw1, kw2=kw2, results=results, total=len(results))


@app.get("/v1/keywords/{word}", response_model=KeywordResponse)
async def check_keyword(word: str, engine: LittleSearchEngine = Depends(get_search_engine)):
    """Apply the keyword test to a single word"""
    keyword = engine.get_keyword(word)
    return KeywordResponse(word=word, keyword=keyword, is_keyword=keyword is not None)


@app.get("/v1/index/{keyword}", response_model=OccurrenceListResponse)
async def get_occurrences(keyword: str, engine: LittleSearchEngine = Depends(get_search_engine)):
    """Occurrence list of an indexed keyword"""
    occs = engine.occurrences(keyword)
    if not occs:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Keyword not indexed: {keyword}",
        )

    return OccurrenceListResponse(
        keyword=keyword.lower(),
        occurrences=[OccurrenceItem(document=o.document, frequency=o.frequency) for o in occs],
        total=len(occs),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "littlesearch.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
