"""
Valence aggregation: contrastive conjunction re-weighting, punctuation
emphasis, and normalization into the four published polarity scores.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, NamedTuple, Sequence

from valence.nlp.lexicon import (
    EXCLAMATION_BOOST,
    NORMALIZE_SCORE_ALPHA,
    QUESTION_BOOST,
    QUESTION_BOOST_COUNT_3,
)
from valence.nlp.schemas import PolarityResult

logger = logging.getLogger(__name__)

BUT_BEFORE_SCALAR = 0.5
BUT_AFTER_SCALAR = 1.5
MAX_EXCLAMATIONS = 4


def round_half_away(value: float, places: int) -> float:
    """Round half away from zero; built-in round() rounds half to even."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# =============================================================================
# CONJUNCTION
# =============================================================================


def but_index(tokens: Sequence[str]) -> int:
    """Position of the first "but" (falling back to "BUT"), -1 if absent."""
    for marker in ("but", "BUT"):
        if marker in tokens:
            return list(tokens).index(marker)
    return -1


def check_conjunction_but(tokens: Sequence[str], valences: Sequence[float]) -> List[float]:
    """Halve valences before "but", boost the ones after it by half.

    Returns a new list; the conjunction's own valence is left as is.
    """
    index = but_index(tokens)
    if index < 0:
        return list(valences)
    adjusted = []
    for position, valence in enumerate(valences):
        if position < index:
            valence *= BUT_BEFORE_SCALAR
        elif position > index:
            valence *= BUT_AFTER_SCALAR
        adjusted.append(valence)
    return adjusted


# =============================================================================
# PUNCTUATION
# =============================================================================


def boost_by_exclamation(text: str) -> float:
    return min(text.count("!"), MAX_EXCLAMATIONS) * EXCLAMATION_BOOST


def boost_by_question_mark(text: str) -> float:
    count = text.count("?")
    if count <= 1:
        return 0.0
    if count <= 3:
        return count * QUESTION_BOOST_COUNT_3
    return QUESTION_BOOST


def boost_by_punctuation(text: str) -> float:
    """Emphasis added by "!" (capped at 4) and repeated "?"."""
    return boost_by_exclamation(text) + boost_by_question_mark(text)


# =============================================================================
# NORMALIZATION
# =============================================================================


class SiftedScores(NamedTuple):
    positive: float
    negative: float
    neutral: int


def normalize_score(score: float, alpha: float = NORMALIZE_SCORE_ALPHA) -> float:
    """Map an unbounded valence sum into (-1, 1)."""
    return score / math.sqrt(score * score + alpha)


def sift_sentiment_scores(valences: Sequence[float]) -> SiftedScores:
    """Split valences into positive mass, negative mass and a neutral count.

    Each non-zero valence is pushed one unit away from zero.
    """
    positive = 0.0
    negative = 0.0
    neutral = 0
    for valence in valences:
        if valence > 0.0:
            positive += valence + 1.0
        elif valence < 0.0:
            negative += valence - 1.0
        else:
            neutral += 1
    return SiftedScores(positive, negative, neutral)


def polarity_scores(valences: Sequence[float], text: str) -> PolarityResult:
    """Fold adjusted token valences into negative/neutral/positive/compound."""
    if not valences:
        return PolarityResult.zero()

    total = sum(valences)
    amplifier = boost_by_punctuation(text or "")
    if total > 0.0:
        total += amplifier
    elif total < 0.0:
        total -= amplifier
    compound = normalize_score(total)

    positive, negative, neutral = sift_sentiment_scores(valences)
    if positive > abs(negative):
        positive += amplifier
    elif positive < abs(negative):
        negative -= amplifier

    factor = positive + abs(negative) + neutral
    logger.debug(
        "Sifted: pos=%s neg=%s neu=%s factor=%s compound=%s",
        positive, negative, neutral, factor, compound,
    )

    return PolarityResult(
        negative=round_half_away(abs(negative / factor), 3),
        neutral=round_half_away(abs(neutral / factor), 3),
        positive=round_half_away(abs(positive / factor), 3),
        compound=round_half_away(compound, 4),
    )
