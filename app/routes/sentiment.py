"""
Sentiment API routes.

Endpoints:
- POST /sentiment/score - Polarity of one text sample
- GET /sentiment/languages - Language codes with a lexicon
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from valence.config import settings
from valence.nlp.lexicon import LexiconError, UnsupportedLanguageError, available_languages
from valence.nlp.sentiment import score

logger = logging.getLogger(__name__)
router = APIRouter()


class ScoreRequest(BaseModel):
    """Text sample to score."""

    text: str = Field(..., max_length=100_000)
    language: Optional[str] = None


class ScoreResponse(BaseModel):
    """Polarity scores of a text sample."""

    language: str
    negative: float
    neutral: float
    positive: float
    compound: float
    label: str


class LanguagesResponse(BaseModel):
    languages: list[str]


@router.post("/score", response_model=ScoreResponse)
async def score_text(request: ScoreRequest):
    """Score a text sample with the lexicon of the requested language."""
    language = request.language or settings().VALENCE_DEFAULT_LANGUAGE
    try:
        result = score(request.text, language=language)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LexiconError as e:
        logger.error(f"Lexicon unavailable for {language}: {e}")
        raise HTTPException(status_code=503, detail="Lexicon unavailable")

    return ScoreResponse(language=language, label=result.label, **result.to_dict())


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    """Language codes with a registered lexicon."""
    return LanguagesResponse(languages=sorted(available_languages()))
