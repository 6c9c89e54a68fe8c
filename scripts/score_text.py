#!/usr/bin/env python3
"""
Score the sentiment polarity of text samples.

Usage:
    # Score one or more texts given as arguments
    python scripts/score_text.py "The food here is good" "The service was not great"

    # Score one text per line from stdin
    cat reviews.txt | python scripts/score_text.py --stdin

    # JSON lines output
    python scripts/score_text.py --json "VADER is smart, handsome, and funny!"

    # Debug trace of the token pass
    python scripts/score_text.py --verbose "This is GOOD"
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from valence.config import settings
from valence.nlp.lexicon import LexiconError, UnsupportedLanguageError, get_lexicon
from valence.nlp.sentiment import SentimentAnalyzer

logger = logging.getLogger(__name__)

EXIT_LEXICON_ERROR = 1
EXIT_UNSUPPORTED_LANGUAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lexicon based sentiment polarity scoring")
    parser.add_argument("texts", nargs="*", help="Text samples to score")
    parser.add_argument("--stdin", action="store_true", help="Read one text per line from stdin")
    parser.add_argument(
        "--language",
        default=None,
        help="Lexicon language code (default: VALENCE_DEFAULT_LANGUAGE setting)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON lines instead of a table")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def iter_texts(args: argparse.Namespace) -> Iterable[str]:
    yield from args.texts
    if args.stdin:
        for line in sys.stdin:
            line = line.rstrip("\n")
            if line.strip():
                yield line


def format_row(text: str, scores: dict) -> str:
    return (
        f"neg={scores['negative']:.3f} neu={scores['neutral']:.3f} "
        f"pos={scores['positive']:.3f} compound={scores['compound']:+.4f}  {text}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else settings().LOG_LEVEL.upper()
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    language = args.language or settings().VALENCE_DEFAULT_LANGUAGE
    try:
        analyzer = SentimentAnalyzer(get_lexicon(language))
    except UnsupportedLanguageError as e:
        logger.error(f"❌ {e}")
        return EXIT_UNSUPPORTED_LANGUAGE
    except LexiconError as e:
        logger.error(f"❌ Lexicon load failed: {e}")
        return EXIT_LEXICON_ERROR

    count = 0
    for text in iter_texts(args):
        scores = analyzer.polarity_scores(text).to_dict()
        if args.json:
            print(json.dumps({"text": text, **scores}, ensure_ascii=False))
        else:
            print(format_row(text, scores))
        count += 1

    if count == 0:
        logger.warning("No text given; pass texts as arguments or use --stdin")
    return 0


if __name__ == "__main__":
    sys.exit(main())
