"""
Tests for valence/nlp/valence_engine.py - per-token valence with context.

Expected values are derived by hand from tests/fixtures/test_lexicon.tsv
(good 2.0, great 3.0, bad -2.0, bomb -2.0, kiss 1.8, ...).
"""

import dataclasses
from unittest.mock import patch

import pytest
from valence.nlp.lexicon import (
    ALL_CAPS_BOOSTER_SCORE,
    BOOSTER_WORD_INCREMENT,
    DAMPENER_WORD_DECREMENT,
    N_SCALAR,
)
from valence.nlp.sentiment import SentimentAnalyzer
from valence.nlp.text_properties import TextProperties
from valence.nlp.valence_engine import ValenceEngine, contains_negation, is_negated, wrapped_index


@pytest.fixture
def raw_valences(analyzer, make_properties):
    """Valences straight out of the engine, before conjunction handling."""

    def _raw(text):
        return analyzer.engine.valences(make_properties(text))

    return _raw


# =============================================================================
# BASE LOOKUP
# =============================================================================


class TestBaseValence:
    def test_plain_sentiment_word(self, raw_valences):
        assert raw_valences("The food here is good") == [0.0, 0.0, 0.0, 0.0, 2.0]

    def test_unknown_tokens_are_neutral(self, raw_valences):
        assert raw_valences("lorem ipsum dolor") == [0.0, 0.0, 0.0]

    def test_lookup_ignores_case(self, raw_valences):
        assert raw_valences("Great") == [3.0]

    def test_booster_words_carry_no_valence(self, raw_valences):
        assert raw_valences("very extremely") == [0.0, 0.0]

    def test_emoticon(self, raw_valences):
        assert raw_valences("see you :)") == [0.0, 0.0, 2.0]

    def test_position_not_first_occurrence(self, raw_valences):
        # The second "good" is scored with its own left context
        assert raw_valences("good not good") == pytest.approx([2.0, 0.0, 2.0 * N_SCALAR])


# =============================================================================
# EMPHASIS
# =============================================================================


class TestCapsEmphasis:
    def test_mixed_case_yelling_boosts(self, raw_valences):
        assert raw_valences("This is GOOD") == pytest.approx([0.0, 0.0, 2.0 + ALL_CAPS_BOOSTER_SCORE])

    def test_all_caps_text_gets_no_boost(self, raw_valences):
        assert raw_valences("THIS IS GOOD") == [0.0, 0.0, 2.0]

    def test_negative_word_pushed_further_down(self, raw_valences):
        assert raw_valences("This is BAD")[-1] == pytest.approx(-2.0 - ALL_CAPS_BOOSTER_SCORE)

    def test_yelled_booster(self, raw_valences):
        expected = 2.0 + BOOSTER_WORD_INCREMENT + ALL_CAPS_BOOSTER_SCORE
        assert raw_valences("It is VERY good")[-1] == pytest.approx(expected)


# =============================================================================
# BOOSTERS / DAMPENERS
# =============================================================================


class TestBoosters:
    def test_adjacent_booster(self, raw_valences):
        assert raw_valences("The food is very good")[-1] == pytest.approx(2.0 + BOOSTER_WORD_INCREMENT)

    def test_booster_two_back_is_damped(self, raw_valences):
        assert raw_valences("It was very much good")[-1] == pytest.approx(2.0 + BOOSTER_WORD_INCREMENT * 0.95)

    def test_booster_sign_follows_valence(self, raw_valences):
        assert raw_valences("It is very bad")[-1] == pytest.approx(-2.0 - BOOSTER_WORD_INCREMENT)

    def test_kind_of_dampens(self, raw_valences):
        assert raw_valences("It is kind of good") == pytest.approx([0.0, 0.0, 0.0, 0.0, 2.0 - 0.293])

    def test_valence_modifier_scalar(self, lexicon):
        engine = ValenceEngine(lexicon)
        assert engine.valence_modifier("slightly", 2.0, False) == pytest.approx(-0.293)
        assert engine.valence_modifier("slightly", -2.0, False) == pytest.approx(0.293)
        assert engine.valence_modifier("SLIGHTLY", 2.0, True) == pytest.approx(-0.293 + ALL_CAPS_BOOSTER_SCORE)
        assert engine.valence_modifier("table", 2.0, True) == 0.0


# =============================================================================
# NEGATION
# =============================================================================


class TestNegation:
    def test_not(self, raw_valences):
        assert raw_valences("The food here is not good")[-1] == pytest.approx(2.0 * N_SCALAR)

    def test_contraction(self, raw_valences):
        assert raw_valences("It isn't good") == pytest.approx([0.0, 0.0, 2.0 * N_SCALAR])

    def test_never_so(self, raw_valences):
        # "never so" boosts instead of negating, then "so" right before adds more
        expected = (2.0 + BOOSTER_WORD_INCREMENT) * 1.5 * 1.25
        assert raw_valences("It is never so good")[-1] == pytest.approx(expected)

    def test_sentiment_word_in_window_is_skipped(self, raw_valences):
        # "great" one back is not treated as a modifier, "not" two back still negates
        assert raw_valences("not great good") == pytest.approx([0.0, 3.0 * N_SCALAR, 2.0 * N_SCALAR])

    def test_negation_three_back(self, raw_valences):
        # "very" two back boosts (damped by 0.95) before "not" three back negates
        expected = (2.0 + BOOSTER_WORD_INCREMENT * 0.95) * N_SCALAR
        assert raw_valences("not very much good") == pytest.approx([0.0, 0.0, 0.0, expected])

    def test_never_this(self, raw_valences):
        assert raw_valences("never this good") == pytest.approx([0.0, 0.0, 2.0 * 1.5])

    def test_never_this_two_back(self, raw_valences):
        assert raw_valences("never this much good") == pytest.approx([0.0, 0.0, 0.0, 2.0 * 1.25])

    def test_so_or_this_right_before_without_never(self, raw_valences):
        assert raw_valences("it was this good") == pytest.approx([0.0, 0.0, 0.0, 2.0 * 1.25])

    def test_least(self, raw_valences):
        assert raw_valences("the least good") == pytest.approx([0.0, 0.0, 2.0 * N_SCALAR])

    def test_at_least(self, raw_valences):
        assert raw_valences("at least good") == [0.0, 0.0, 2.0]

    def test_extra_negations(self, lexicon, make_properties):
        props = make_properties("It is nae good")
        plain = SentimentAnalyzer(lexicon).engine.valences(props)
        scots = SentimentAnalyzer(lexicon, extra_negations={"nae"}).engine.valences(props)
        assert plain[-1] == 2.0
        assert scots[-1] == pytest.approx(2.0 * N_SCALAR)


class TestIsNegated:
    def test_negation_words(self, lexicon):
        assert is_negated(["never"], lexicon)
        assert is_negated(["aint"], lexicon)
        assert not is_negated(["always"], lexicon)

    def test_at_least_phrase(self, lexicon):
        assert is_negated(["at", "least"], lexicon)
        assert not is_negated(["least"], lexicon)

    def test_contractions(self, lexicon):
        assert is_negated(["mayn't"], lexicon)
        assert not is_negated(["mayn't"], lexicon, include_contractions=False)

    def test_extra_words_merged(self, lexicon):
        assert is_negated(["nae"], lexicon, extra_negations=["nae"])
        assert "nae" not in lexicon.negations


class TestEngineNegations:
    def test_merged_once_at_construction(self, lexicon):
        engine = ValenceEngine(lexicon, ["nae"])
        assert engine.negations == lexicon.negations | {"nae"}
        assert isinstance(engine.negations, frozenset)
        assert "nae" not in lexicon.negations

    def test_scoring_does_not_rebuild_negations(self, lexicon, make_properties):
        engine = ValenceEngine(lexicon, ["nae"])
        with patch("valence.nlp.valence_engine.is_negated") as mock_is_negated:
            valences = engine.valences(make_properties("It is nae very good"))
        mock_is_negated.assert_not_called()
        assert valences[-1] == pytest.approx((2.0 + BOOSTER_WORD_INCREMENT) * N_SCALAR)

    def test_contains_negation(self):
        assert contains_negation(["nae"], frozenset({"nae"}))
        assert contains_negation(["at", "least"], frozenset())
        assert contains_negation(["isn't"], frozenset())
        assert not contains_negation(["isn't"], frozenset(), include_contractions=False)


# =============================================================================
# IDIOMS
# =============================================================================


class TestIdioms:
    def test_left_idiom_overrides_word(self, raw_valences):
        assert raw_valences("you are the bomb") == [0.0, 0.0, 0.0, 3.0]

    def test_idiom_needs_three_tokens_of_context(self, raw_valences):
        # "a" is dropped by the tokenizer, leaving only two tokens before "bomb"
        assert raw_valences("you are a bomb") == [0.0, 0.0, -2.0]

    def test_right_trigram_idiom(self, raw_valences):
        assert raw_valences("I think that was a kiss of death") == [0.0, 0.0, 0.0, -1.5, 0.0, 0.0]

    def test_right_bigram_idiom(self, lexicon, tokenizer):
        lexicon = dataclasses.replace(lexicon, word_valence={**lexicon.word_valence, "yeah": 1.2})
        props = TextProperties.from_text("we said oh yeah right", lexicon, tokenizer)
        assert ValenceEngine(lexicon).valences(props) == [0.0, 0.0, 0.0, -2.0, 0.0]

    def test_dampener_phrase_two_back(self, raw_valences):
        assert raw_valences("it was sort of good") == pytest.approx([0.0, 0.0, 0.0, 0.0, 2.0 + DAMPENER_WORD_DECREMENT])

    def test_dampener_phrase_three_back(self, raw_valences):
        assert raw_valences("sort of the good") == pytest.approx([0.0, 0.0, 0.0, 2.0 + DAMPENER_WORD_DECREMENT])


def test_wrapped_index():
    assert wrapped_index(5, 2) == 2
    assert wrapped_index(5, -1) == 4
    assert wrapped_index(5, -5) == 0
    with pytest.raises(IndexError):
        wrapped_index(2, -3)
