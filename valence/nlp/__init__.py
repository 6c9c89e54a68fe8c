"""
NLP modules for valence based sentiment analysis.

PIPELINE:
- Tokenizer: whitespace and punctuation-stripped token views (tokenizer.py)
- TextProperties: canonical tokens + cap differential (text_properties.py)
- ValenceEngine: per-token valence with context modifiers (valence_engine.py)
- Conjunction and normalization into polarity scores (scoring.py)
- Public entry points (sentiment.py)

Lexicon data is loaded once per language and only read afterwards (lexicon.py).
"""

# =============================================================================
# LEXICON
# =============================================================================
from valence.nlp.lexicon import (
    Lexicon,
    LexiconError,
    UnsupportedLanguageError,
    available_languages,
    get_lexicon,
    english_lexicon,
    load_word_valence,
)

# =============================================================================
# TEXT PROCESSING
# =============================================================================
from valence.nlp.tokenizer import Tokenizer
from valence.nlp.text_properties import TextProperties, reconcile_tokens

# =============================================================================
# SCORING
# =============================================================================
from valence.nlp.schemas import PolarityResult
from valence.nlp.valence_engine import ValenceEngine
from valence.nlp.scoring import check_conjunction_but, polarity_scores
from valence.nlp.sentiment import SentimentAnalyzer, score, sentiment_score


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    # Lexicon
    "Lexicon",
    "LexiconError",
    "UnsupportedLanguageError",
    "available_languages",
    "get_lexicon",
    "english_lexicon",
    "load_word_valence",
    # Text processing
    "Tokenizer",
    "TextProperties",
    "reconcile_tokens",
    # Scoring
    "PolarityResult",
    "ValenceEngine",
    "check_conjunction_but",
    "polarity_scores",
    "SentimentAnalyzer",
    "score",
    "sentiment_score",
]
