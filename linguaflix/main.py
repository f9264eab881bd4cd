"""
Linguaflix - command-line entry point
Prints proficiency-appropriate sentences from a subtitle file or a catalog show
"""
import sys
import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv

from linguaflix import settings
from linguaflix.core.cache_manager import CacheManager
from linguaflix.core.sentence_pipeline import SentencePipeline
from linguaflix.core.subtitle_exceptions import (
    ShowNotFoundError,
    SubtitleEncodingError,
    SubtitleFormatError,
    SubtitleParseError
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup console logging configuration"""
    log_level = logging.DEBUG if verbose else logging.INFO

    simple_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(simple_formatter)

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True
    )
    logging.getLogger('spacy').setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Linguaflix sentence picker")
    parser.add_argument("subtitle", nargs="?", help="Path to a SubRip subtitle file")
    parser.add_argument("--show", help="Show name from the catalog (instead of a file path)")
    parser.add_argument("--language", default="english", help="Subtitle language for --show (default: english)")
    parser.add_argument(
        "--level",
        default="beginner",
        help=f"Proficiency level (configured: {', '.join(settings.get_proficiency_levels())})"
    )
    parser.add_argument("--repeat", type=int, default=1, help="Number of sentences to draw (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.subtitle and not args.show:
        parser.error("either a subtitle path or --show is required")

    setup_logging(args.verbose)

    cache = CacheManager()
    pipeline = SentencePipeline(cache)

    try:
        for _ in range(max(1, args.repeat)):
            if args.show:
                result = pipeline.fetch_sentence_for_show(args.show, args.language, args.level)
            else:
                result = pipeline.fetch_sentence(args.subtitle, args.level)

            source = "cache" if result.from_cache else "parsed"
            print(f"[{source}] {result.sentence or 'No sentence available'}")
    except (OSError, ShowNotFoundError, SubtitleEncodingError, SubtitleFormatError, SubtitleParseError) as e:
        logger.error(f"Execution failed: {e}")
        return 1
    finally:
        cache.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
