"""
Sentiment scoring: lexicon and rule based valence analysis.

Pipeline per call:
    text -> TextProperties (tokens + cap differential)
         -> ValenceEngine (one valence per token)
         -> check_conjunction_but
         -> polarity_scores -> PolarityResult

Only the Lexicon is shared between calls and it is never written after
construction, so any number of threads may score concurrently.
"""

import logging
from typing import Iterable, List, Optional

from valence.config import settings
from valence.nlp.lexicon import Lexicon, get_lexicon
from valence.nlp.schemas import PolarityResult
from valence.nlp.scoring import check_conjunction_but, polarity_scores
from valence.nlp.text_properties import TextProperties
from valence.nlp.tokenizer import Tokenizer
from valence.nlp.valence_engine import ValenceEngine

logger = logging.getLogger(__name__)


class SentimentAnalyzer:
    """Valence-based sentiment analysis of short texts.

    Step by step::

        sa = SentimentAnalyzer()
        sa.set_text("VADER is smart, handsome, and funny!")
        sa.get_polarity()

    One step::

        sa.polarity_scores("VADER sometimes fails too as everyone else!")

    Args:
        lexicon: Language resources; defaults to the shared lexicon of the
            VALENCE_DEFAULT_LANGUAGE setting.
        tokenizer: Tokenizer; defaults to the whitespace tokenizer.
        extra_negations: Words treated as negations on top of the lexicon's.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        tokenizer: Optional[Tokenizer] = None,
        extra_negations: Iterable[str] = (),
    ):
        self.lexicon = lexicon if lexicon is not None else get_lexicon(settings().VALENCE_DEFAULT_LANGUAGE)
        self.tokenizer = tokenizer or Tokenizer()
        self.engine = ValenceEngine(self.lexicon, extra_negations)
        self._text: Optional[str] = None
        self._properties: Optional[TextProperties] = None
        self._polarity: Optional[PolarityResult] = None

    @property
    def text(self) -> Optional[str]:
        return self._text

    def set_text(self, text: Optional[str]) -> None:
        """Set the sample to analyse; any memoized polarity is dropped."""
        self._text = text
        self._properties = TextProperties.from_text(text, self.lexicon, self.tokenizer)
        self._polarity = None

    def get_polarity(self) -> Optional[PolarityResult]:
        """Polarity of the current text, computed once per set_text()."""
        if self._properties is None:
            return None
        if self._polarity is None:
            self._polarity = self._score(self._properties)
        return self._polarity

    def polarity_scores(self, text: Optional[str]) -> PolarityResult:
        """Set the text and score it in one step."""
        self.set_text(text)
        return self.get_polarity()

    def valences(self, text: Optional[str]) -> List[float]:
        """Unrounded per-token valences after conjunction adjustment."""
        properties = TextProperties.from_text(text, self.lexicon, self.tokenizer)
        return check_conjunction_but(properties.words_and_emoticons, self.engine.valences(properties))

    def _score(self, properties: TextProperties) -> PolarityResult:
        sentiments = self.engine.valences(properties)
        sentiments = check_conjunction_but(properties.words_and_emoticons, sentiments)
        logger.debug("Sentiment state after checking conjunctions: %s", sentiments)
        return polarity_scores(sentiments, properties.text)


def score(text: Optional[str], language: Optional[str] = None) -> PolarityResult:
    """Score one text with the shared lexicon of ``language``.

    ``language`` defaults to the VALENCE_DEFAULT_LANGUAGE setting.

    Raises:
        UnsupportedLanguageError: unknown language code.
    """
    return SentimentAnalyzer(get_lexicon(language or settings().VALENCE_DEFAULT_LANGUAGE)).polarity_scores(text)


def sentiment_score(text: str) -> float:
    """Return a sentiment polarity score in [-1.0, 1.0].

    Args:
        text: Input text to analyse.

    Returns:
        Compound score: -1 (most negative) … 0 (neutral) … 1 (most positive).
        Returns 0.0 for empty or non-string input.
    """
    if not text or not isinstance(text, str):
        return 0.0
    return score(text).compound
