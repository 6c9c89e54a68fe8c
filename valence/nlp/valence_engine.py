"""
Per-token valence computation.

One left-to-right pass over the canonical tokens. Each sentiment word starts
from its lexicon valence and is then adjusted by its left context:

1. all-caps emphasis (only when the text mixes cases)
2. boosters/dampeners up to three tokens back, damped by distance
3. negation ("not good", "never so good", "isn't great")
4. idiomatic phrases ("the bomb", "kiss of death") override the word
5. "least" as a negator unless preceded by "at"/"very"

Booster words and "kind of" carry no valence of their own.
"""

import logging
from typing import AbstractSet, Iterable, List, Sequence

from valence.nlp.lexicon import (
    ALL_CAPS_BOOSTER_SCORE,
    DAMPENER_WORD_DECREMENT,
    N_SCALAR,
    Lexicon,
)
from valence.nlp.text_properties import TextProperties

logger = logging.getLogger(__name__)

# Context window: three tokens to the left
WINDOW_SIZE = 3
# Modifier damping by distance (1, 2, 3 tokens back)
DISTANCE_DAMPING = (1.0, 0.95, 0.9)

NEVER_SO_SCALAR = 1.5
NEVER_SO_FAR_SCALAR = 1.25
_SO_THIS = ("so", "this")


def wrapped_index(length: int, index: int) -> int:
    """Resolve a negative context index by wrapping to the end of the tokens.

    Mirrors negative list indexing: -1 is the last token. Index
    resolution for the context window goes through here only.
    """
    if index >= 0:
        return index
    resolved = length - abs(index)
    if resolved < 0:
        raise IndexError(f"context index {index} out of range for {length} tokens")
    return resolved


def _has_at_least(tokens: Sequence[str]) -> bool:
    tokens = list(tokens)
    if "least" in tokens:
        index = tokens.index("least")
        return index > 0 and tokens[index - 1] == "at"
    return False


def _has_contraction(tokens: Iterable[str]) -> bool:
    return any(t.endswith("n't") for t in tokens)


def contains_negation(tokens: Sequence[str], negations: AbstractSet[str], include_contractions: bool = True) -> bool:
    """Does the token list carry one of ``negations``, "at least" or a "...n't"?"""
    result = any(t in negations for t in tokens) or _has_at_least(tokens)
    if include_contractions:
        return result or _has_contraction(tokens)
    return result


def is_negated(
    tokens: Sequence[str],
    lexicon: Lexicon,
    extra_negations: Iterable[str] = (),
    include_contractions: bool = True,
) -> bool:
    """Does the token list carry a negation?

    Negation words are the lexicon's set merged with ``extra_negations``.
    "at least" and any "...n't" contraction count as well.
    """
    return contains_negation(tokens, lexicon.negations.union(extra_negations), include_contractions)


class ValenceEngine:
    """Computes the raw valence sequence of a text."""

    def __init__(self, lexicon: Lexicon, extra_negations: Iterable[str] = ()):
        self.lexicon = lexicon
        self.negations = lexicon.negations.union(extra_negations)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def valence_modifier(self, preceding_word: str, current_valence: float, is_cap_diff: bool) -> float:
        """Booster/dampener scalar contributed by a preceding word."""
        scalar = self.lexicon.booster_of(preceding_word)
        if scalar is None:
            return 0.0
        if current_valence < 0.0:
            scalar *= -1.0
        if is_cap_diff and self.lexicon.is_upper(preceding_word):
            if current_valence > 0.0:
                scalar += ALL_CAPS_BOOSTER_SCORE
            else:
                scalar -= ALL_CAPS_BOOSTER_SCORE
        return scalar

    def _negated(self, token: str) -> bool:
        return contains_negation([token], self.negations)

    def check_for_never(self, valence: float, distance: int, i: int, close_index: int, tokens: Sequence[str]) -> float:
        """Negation and "never so/this" handling for one window distance (0-based)."""
        if distance == 0:
            if self._negated(tokens[i - 1]):
                valence *= N_SCALAR
        elif distance == 1:
            if tokens[i - 2] == "never" and tokens[i - 1] in _SO_THIS:
                valence *= NEVER_SO_SCALAR
            elif self._negated(tokens[close_index]):
                valence *= N_SCALAR
        elif distance == 2:
            if (tokens[i - 3] == "never" and tokens[i - 2] in _SO_THIS) or tokens[i - 1] in _SO_THIS:
                valence *= NEVER_SO_FAR_SCALAR
            elif self._negated(tokens[close_index]):
                valence *= N_SCALAR
        return valence

    def check_for_idioms(self, valence: float, i: int, tokens: Sequence[str]) -> float:
        """Override the valence with a sentiment-laden idiom around token i.

        Needs three tokens of left context (i >= 3).
        """
        idioms = self.lexicon.idioms
        one_before = f"{tokens[i - 2]} {tokens[i - 1]}"
        two_before = f"{tokens[i - 3]} {tokens[i - 2]}"
        left_grams = (
            f"{tokens[i - 1]} {tokens[i]}",
            f"{tokens[i - 2]} {tokens[i - 1]} {tokens[i]}",
            one_before,
            f"{tokens[i - 3]} {tokens[i - 2]} {tokens[i - 1]}",
            two_before,
        )
        logger.debug("Grams: %s", left_grams)

        for gram in left_grams:
            if gram in idioms:
                valence = idioms[gram]
                break

        if len(tokens) - 1 > i:
            right_bigram = f"{tokens[i]} {tokens[i + 1]}"
            if right_bigram in idioms:
                valence = idioms[right_bigram]
        if len(tokens) - 1 > i + 1:
            right_trigram = f"{tokens[i]} {tokens[i + 1]} {tokens[i + 2]}"
            if right_trigram in idioms:
                valence = idioms[right_trigram]

        if two_before in self.lexicon.boosters or one_before in self.lexicon.boosters:
            valence += DAMPENER_WORD_DECREMENT
        return valence

    # ------------------------------------------------------------------
    # Per-token pass
    # ------------------------------------------------------------------

    def token_valence(self, i: int, properties: TextProperties) -> float:
        """Valence of the token at position i given its left context."""
        tokens = properties.words_and_emoticons
        item = tokens[i]
        lower = item.lower()

        is_kind_of = i < len(tokens) - 1 and lower == "kind" and tokens[i + 1].lower() == "of"
        if is_kind_of or self.lexicon.is_booster(item):
            return 0.0

        valence = self.lexicon.valence_of(item)
        if valence is None:
            return 0.0

        if properties.is_cap_diff and self.lexicon.is_upper(item):
            valence = valence + ALL_CAPS_BOOSTER_SCORE if valence > 0.0 else valence - ALL_CAPS_BOOSTER_SCORE

        for distance in range(WINDOW_SIZE):
            if i <= distance:
                continue
            close_index = wrapped_index(len(tokens), i - (distance + 1))
            close_token = tokens[close_index]
            if self.lexicon.has_valence(close_token):
                continue

            modifier = self.valence_modifier(close_token, valence, properties.is_cap_diff)
            if modifier != 0.0:
                modifier *= DISTANCE_DAMPING[distance]
            valence += modifier

            valence = self.check_for_never(valence, distance, i, close_index, tokens)
            if distance == 2:
                valence = self.check_for_idioms(valence, i, tokens)

        return self._least_check(valence, i, tokens)

    def _least_check(self, valence: float, i: int, tokens: Sequence[str]) -> float:
        """Negate after "least" unless it reads "at least" or "very least"."""
        if i > 1 and not self.lexicon.has_valence(tokens[i - 1]) and tokens[i - 1].lower() == "least":
            if tokens[i - 2].lower() not in ("at", "very"):
                valence *= N_SCALAR
        elif i > 0 and not self.lexicon.has_valence(tokens[i - 1]) and tokens[i - 1] == "least":
            valence *= N_SCALAR
        return valence

    def valences(self, properties: TextProperties) -> List[float]:
        """Raw valence per canonical token, index aligned."""
        sentiments = [self.token_valence(i, properties) for i in range(len(properties))]
        logger.debug("Sentiment state after first pass: %s", sentiments)
        return sentiments

