"""
Text preprocessing for valence scoring.

Reconciles the two tokenizer views into one canonical token sequence and
computes the capitalization differential (mixed-case yelling).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from valence.nlp.lexicon import Lexicon
from valence.nlp.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def reconcile_tokens(
    words_only: Sequence[str],
    words_and_emoticons: Sequence[str],
    punctuation: Sequence[str],
) -> List[str]:
    """Replace "word!" and "!word" artifacts with the bare "word".

    Only tokens that are a known bare word with one punctuation mark glued on
    either side are rewritten; emoticons like ":-)" match no word and stay.
    Positions are preserved and the inputs are not modified.
    """
    replacements: Dict[str, str] = {}
    for word in words_only:
        for mark in punctuation:
            replacements.setdefault(word + mark, word)
            replacements.setdefault(mark + word, word)
    return [replacements.get(token, token) for token in words_and_emoticons]


def is_cap_differential(tokens: Sequence[str], lexicon: Lexicon) -> bool:
    """True iff some, but not all, tokens are yelling.

    [GET, THE, HELL, OUT] -> False, [GET, the, HELL, OUT] -> True,
    [get, the, hell, out] -> False.
    """
    all_caps = sum(1 for t in tokens if lexicon.is_upper(t))
    return 0 < all_caps < len(tokens)


@dataclass(frozen=True)
class TextProperties:
    """Canonical tokens and emphasis flag of one text sample."""

    text: str
    words_and_emoticons: Tuple[str, ...]
    is_cap_diff: bool

    @classmethod
    def from_text(
        cls,
        text: Optional[str],
        lexicon: Lexicon,
        tokenizer: Optional[Tokenizer] = None,
    ) -> "TextProperties":
        tokenizer = tokenizer or Tokenizer()
        text = text or ""
        words_only = tokenizer.strip_punctuation_and_split(text)
        words_and_emoticons = tokenizer.split_whitespace(text)
        tokens = reconcile_tokens(words_only, words_and_emoticons, lexicon.punctuation)
        cap_diff = is_cap_differential(tokens, lexicon)
        logger.debug("Tokens: %s (cap differential: %s)", tokens, cap_diff)
        return cls(text=text, words_and_emoticons=tuple(tokens), is_cap_diff=cap_diff)

    def __len__(self) -> int:
        return len(self.words_and_emoticons)
