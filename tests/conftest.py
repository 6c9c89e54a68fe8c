"""
Pytest configuration and shared fixtures for the test suite.

Provides:
- A small deterministic test lexicon (tests/fixtures/test_lexicon.tsv)
- Analyzer and tokenizer fixtures built on it
- Pytest markers for test categorization
- Settings/lexicon cache isolation
"""

import pytest
from pathlib import Path


# =============================================================================
# PYTEST MARKERS CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "bundled_lexicon: marks tests that load the vader_lexicon.txt shipped with vaderSentiment",
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running (deselect with '-m \"not slow\"')"
    )


# =============================================================================
# LEXICON FIXTURES
# =============================================================================


@pytest.fixture
def fixtures_dir():
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def test_lexicon_path(fixtures_dir):
    return fixtures_dir / "test_lexicon.tsv"


@pytest.fixture
def lexicon(test_lexicon_path):
    """English negations, boosters and idioms over the small test word table."""
    from valence.nlp.lexicon import english_lexicon

    return english_lexicon(test_lexicon_path)


@pytest.fixture
def tokenizer():
    from valence.nlp.tokenizer import Tokenizer

    return Tokenizer()


@pytest.fixture
def analyzer(lexicon, tokenizer):
    from valence.nlp.sentiment import SentimentAnalyzer

    return SentimentAnalyzer(lexicon=lexicon, tokenizer=tokenizer)


@pytest.fixture
def make_properties(lexicon, tokenizer):
    """Factory fixture for TextProperties over the test lexicon."""

    def _create(text):
        from valence.nlp.text_properties import TextProperties

        return TextProperties.from_text(text, lexicon, tokenizer)

    return _create


# =============================================================================
# SETTINGS / CACHE ISOLATION
# =============================================================================


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the cached settings and lexicons before and after a test.

    Tests set VALENCE_* variables with monkeypatch.setenv before calling
    settings() or get_lexicon().
    """
    from valence.config import settings
    from valence.nlp.lexicon import reset_lexicon_cache

    settings.cache_clear()
    reset_lexicon_cache()
    yield monkeypatch
    settings.cache_clear()
    reset_lexicon_cache()


@pytest.fixture
def use_test_lexicon(fresh_settings, test_lexicon_path):
    """Point the shared English lexicon at the test word table."""
    fresh_settings.setenv("VALENCE_LEXICON_PATH", str(test_lexicon_path))
    return test_lexicon_path
