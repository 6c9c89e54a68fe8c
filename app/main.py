"""
FastAPI application for valence sentiment scoring.

Provides REST API endpoints for:
- Scoring a text sample (negative / neutral / positive / compound)
- Listing the languages with a registered lexicon
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from app.routes import sentiment
from valence import __version__
from valence.config import settings
from valence.nlp.lexicon import LexiconError, UnsupportedLanguageError, get_lexicon

# Configure logging
logging.basicConfig(
    level=settings().LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info("Starting valence sentiment API...")
    # Startup: the default lexicon must load, otherwise the service does not start
    try:
        lexicon = get_lexicon(settings().VALENCE_DEFAULT_LANGUAGE)
    except (LexiconError, UnsupportedLanguageError) as e:
        logger.error(f"❌ Lexicon preload failed: {e}")
        raise
    logger.info(f"Lexicon preloaded: {lexicon.language} ({len(lexicon)} entries)")

    yield

    # Shutdown
    logger.info("Shutting down valence sentiment API...")


# Create FastAPI app
app = FastAPI(
    title="Valence Sentiment API",
    description="Lexicon and rule based sentiment polarity scoring",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(sentiment.router, prefix="/sentiment", tags=["Sentiment"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - redirect to docs."""
    return {"message": "Valence Sentiment API", "docs": "/docs"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for monitoring and load balancers."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }
