"""
Lexicon data for valence scoring.

Provides:
- The immutable Lexicon value consumed by the scoring pipeline
- The word-valence TSV loader (token<TAB>valence[<TAB>ignored...])
- The English lexicon (word table shipped with vaderSentiment)
- A small language registry, built lazily once per process
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BOOSTER_WORD_INCREMENT = 0.293
DAMPENER_WORD_DECREMENT = -0.293
ALL_CAPS_BOOSTER_SCORE = 0.733
N_SCALAR = -0.74  # Negation flips and softens
EXCLAMATION_BOOST = 0.292
QUESTION_BOOST_COUNT_3 = 0.18  # Per mark, 2-3 question marks
QUESTION_BOOST = 0.96  # Flat, 4+ question marks
NORMALIZE_SCORE_ALPHA = 15.0

VADER_LEXICON_FILE = "vader_lexicon.txt"

# At least one ASCII letter somewhere in the token
_HAS_LETTER = re.compile(r"[a-zA-Z]")
_URL_PREFIXES = ("http://", "https://")


class LexiconError(RuntimeError):
    """Raised when a lexicon resource cannot be loaded. Always fatal."""


class UnsupportedLanguageError(ValueError):
    """Raised for a language code with no registered lexicon."""


# =============================================================================
# LEXICON VALUE
# =============================================================================


def is_upper(token: str) -> bool:
    """Is the token written in capitals (yelling)?

    URLs and tokens without any letter never count, e.g. "HTTP://T.CO" and
    ":-)" are not upper, "GOOD" and "WON'T" are.
    """
    if token.lower().startswith(_URL_PREFIXES):
        return False
    if not _HAS_LETTER.search(token):
        return False
    return not any(ch.islower() for ch in token)


@dataclass(frozen=True)
class Lexicon:
    """Read-only language resources for one scoring language.

    All mappings are wrapped in MappingProxyType so a shared instance can be
    read concurrently without any locking.
    """

    word_valence: Mapping[str, float]
    negations: frozenset
    boosters: Mapping[str, float]
    idioms: Mapping[str, float]
    punctuation: Tuple[str, ...]
    language: str = "en"
    source: str = field(default="<memory>", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "word_valence", MappingProxyType(dict(self.word_valence)))
        object.__setattr__(self, "boosters", MappingProxyType(dict(self.boosters)))
        object.__setattr__(self, "idioms", MappingProxyType(dict(self.idioms)))
        object.__setattr__(self, "negations", frozenset(self.negations))
        object.__setattr__(self, "punctuation", tuple(self.punctuation))

    def is_upper(self, token: str) -> bool:
        return is_upper(token)

    def valence_of(self, token: str) -> Optional[float]:
        """Case-insensitive word valence lookup, None when absent."""
        return self.word_valence.get(token.lower())

    def has_valence(self, token: str) -> bool:
        return token.lower() in self.word_valence

    def booster_of(self, token: str) -> Optional[float]:
        return self.boosters.get(token.lower())

    def is_booster(self, token: str) -> bool:
        return token.lower() in self.boosters

    def __len__(self) -> int:
        return len(self.word_valence)


# =============================================================================
# TSV LOADING
# =============================================================================


def parse_word_valence(lines: Iterable[str], source: str = "<memory>") -> Dict[str, float]:
    """Parse token<TAB>valence lines into a dict.

    Blank lines are skipped. Any other malformed line aborts the whole load:
    a half-read table would silently skew every score.

    Raises:
        LexiconError: on a line with fewer than two fields or a bad valence,
            or when nothing was parsed at all.
    """
    table: Dict[str, float] = {}
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) < 2:
            raise LexiconError(f"{source}:{line_no}: expected token<TAB>valence, got {line!r}")
        try:
            table[fields[0]] = float(fields[1])
        except ValueError as e:
            raise LexiconError(f"{source}:{line_no}: invalid valence {fields[1]!r}") from e
    if not table:
        raise LexiconError(f"{source}: no lexicon entries found")
    return table


def load_word_valence(path: Union[str, Path]) -> Dict[str, float]:
    """Load a word-valence TSV file from disk.

    Raises:
        LexiconError: if the file is missing, unreadable or malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            table = parse_word_valence(f, source=str(path))
    except OSError as e:
        raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise LexiconError(f"Lexicon file {path} is not valid UTF-8: {e}") from e
    logger.info("Loaded %d lexicon entries from %s", len(table), path)
    return table


def load_vader_word_valence() -> Dict[str, float]:
    """Load the word table bundled inside the vaderSentiment distribution."""
    try:
        resource = resources.files("vaderSentiment").joinpath(VADER_LEXICON_FILE)
        with resources.as_file(resource) as path:
            return load_word_valence(path)
    except ModuleNotFoundError as e:
        raise LexiconError("vaderSentiment is not installed; cannot locate the English lexicon") from e


# =============================================================================
# ENGLISH
# =============================================================================

PUNCTUATION = (
    ".", "!", "?", ",", ";", ":", "-", "'", '"',
    "!!", "!!!", "??", "???", "?!?", "!?!", "?!?!", "!?!?",
)

NEGATIVE_WORDS = frozenset({
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "isnt", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't",
    "neednt", "needn't", "never", "none", "nope", "nor", "not", "nothing",
    "nowhere", "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom",
    "despite",
})

_BOOSTS = (
    "absolutely", "amazingly", "awfully", "completely", "considerably",
    "decidedly", "deeply", "effing", "enormously", "entirely", "especially",
    "exceptionally", "extremely", "fabulously", "flipping", "flippin",
    "fricking", "frickin", "frigging", "friggin", "fully", "fucking",
    "greatly", "hella", "highly", "hugely", "incredibly", "intensely",
    "majorly", "more", "most", "particularly", "purely", "quite", "really",
    "remarkably", "so", "substantially", "thoroughly", "totally",
    "tremendously", "uber", "unbelievably", "unusually", "utterly", "very",
)
_DAMPENS = (
    "almost", "barely", "hardly", "just enough", "kind of", "kinda",
    "kindof", "kind-of", "less", "little", "marginally", "occasionally",
    "partly", "scarcely", "slightly", "somewhat", "sort of", "sorta",
    "sortof",
)
BOOSTER_DICT = {
    **{w: BOOSTER_WORD_INCREMENT for w in _BOOSTS},
    **{w: DAMPENER_WORD_DECREMENT for w in _DAMPENS},
}

SENTIMENT_LADEN_IDIOMS = {
    "cut the mustard": 2.0,
    "bad ass": 1.5,
    "kiss of death": -1.5,
    "yeah right": -2.0,
    "the bomb": 3.0,
    "hand to mouth": -2.0,
    "the shit": 3.0,
}


def english_lexicon(path: Optional[Union[str, Path]] = None) -> Lexicon:
    """Build the English lexicon.

    Args:
        path: Optional word-valence TSV overriding the bundled VADER table.
    """
    if path is not None:
        word_valence = load_word_valence(path)
        source = str(path)
    else:
        word_valence = load_vader_word_valence()
        source = f"vaderSentiment/{VADER_LEXICON_FILE}"
    return Lexicon(
        word_valence=word_valence,
        negations=NEGATIVE_WORDS,
        boosters=BOOSTER_DICT,
        idioms=SENTIMENT_LADEN_IDIOMS,
        punctuation=PUNCTUATION,
        language="en",
        source=source,
    )


# =============================================================================
# LANGUAGE REGISTRY
# =============================================================================

_LANGUAGE_FACTORIES = {
    "en": english_lexicon,
}

_lexicon_cache: Dict[str, Lexicon] = {}
_lexicon_lock = threading.Lock()


def available_languages() -> set:
    """Language codes with a registered lexicon."""
    return set(_LANGUAGE_FACTORIES)


def get_lexicon(language: Optional[str] = None) -> Lexicon:
    """Return the shared lexicon for a language, building it on first use.

    ``language`` defaults to the VALENCE_DEFAULT_LANGUAGE setting.

    Construction happens once per language under a lock; afterwards the
    instance is only ever read.

    Raises:
        UnsupportedLanguageError: unknown language code.
        LexiconError: the lexicon resource failed to load.
    """
    from valence.config import settings

    if language is None:
        language = settings().VALENCE_DEFAULT_LANGUAGE
    code = language.strip().lower()
    factory = _LANGUAGE_FACTORIES.get(code)
    if factory is None:
        raise UnsupportedLanguageError(
            f"Unsupported language {language!r}; available: {sorted(_LANGUAGE_FACTORIES)}"
        )

    cached = _lexicon_cache.get(code)
    if cached is not None:
        return cached

    with _lexicon_lock:
        cached = _lexicon_cache.get(code)
        if cached is None:
            cached = factory(settings().lexicon_path)
            _lexicon_cache[code] = cached
            logger.info("Lexicon ready: language=%s entries=%d source=%s", code, len(cached), cached.source)
        return cached


def reset_lexicon_cache() -> None:
    """Drop cached lexicons (tests and settings reloads)."""
    with _lexicon_lock:
        _lexicon_cache.clear()
