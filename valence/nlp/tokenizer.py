"""
Whitespace tokenizer for valence scoring.

Two views of the same text are produced:
- words and emoticons: plain whitespace split, punctuation left attached
- words only: punctuation removed first, except '.' and "'" inside a word
  (contractions like "can't", abbreviations like "J.R.R", domains)
"""

import re
import string
from typing import List, Optional

# ASCII whitespace only: space, \t, \n, \v, \f, \r
_SPACE = r" \t\n\x0b\f\r"
WHITESPACE_PATTERN = re.compile(rf"[{_SPACE}]")

_PUNCT = re.escape(string.punctuation)
_PUNCT_EXCEPT_DOT_QUOTE = re.escape(string.punctuation.replace(".", "").replace("'", ""))

# '.' and "'" are kept only between two characters that are neither ASCII space nor punctuation
PUNCTUATION_EXCLUDE_CONTRACTION_PATTERN = re.compile(
    rf"[{_PUNCT_EXCEPT_DOT_QUOTE}]"
    rf"|(?:^|(?<=[{_SPACE}{_PUNCT}]))[.']"
    rf"|[.'](?=$|[{_SPACE}{_PUNCT}])"
)

TOKEN_SIZE_MIN = 2


def remove_tokens_by_size(tokens: List[str], min_length: int = TOKEN_SIZE_MIN, max_length: Optional[int] = None) -> List[str]:
    """Keep tokens whose length is within [min_length, max_length]."""
    return [
        t for t in tokens
        if len(t) >= min_length and (max_length is None or len(t) <= max_length)
    ]


class Tokenizer:
    """Splits raw text into the token lists TextProperties reconciles."""

    def __init__(self, min_length: int = TOKEN_SIZE_MIN):
        self.min_length = min_length

    def split_whitespace(self, text: str) -> List[str]:
        """Whitespace split, punctuation attached ("good!" stays "good!")."""
        return remove_tokens_by_size(WHITESPACE_PATTERN.split(text or ""), self.min_length)

    def strip_punctuation_and_split(self, text: str) -> List[str]:
        """Punctuation replaced by a space, then whitespace split."""
        cleaned = PUNCTUATION_EXCLUDE_CONTRACTION_PATTERN.sub(" ", text or "")
        return remove_tokens_by_size(WHITESPACE_PATTERN.split(cleaned), self.min_length)
