"""
Sentence pipeline for Linguaflix

Turns a subtitle file into one proficiency-appropriate sentence:
ingest -> clean -> segment (cached per file) -> analyze + filter -> select.
"""
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from linguaflix import settings
from linguaflix.models import SentenceResult
from linguaflix.core.cache_manager import CacheManager
from linguaflix.core.proficiency_filter import ProficiencyFilter
from linguaflix.core.sentence_segmenter import SentenceSegmenter
from linguaflix.core.sentence_selector import select_sentence
from linguaflix.core.subtitle_cleaner import SubtitleCleaner
from linguaflix.core.subtitle_exceptions import ShowNotFoundError
from linguaflix.core.subtitle_parser import iter_subtitle_lines

logger = logging.getLogger(__name__)


def get_catalog_key(show: str, target_language: str) -> str:
    """Build the '<show>-<lang>' catalog key, e.g. ('9-1-1', 'English') -> '9-1-1-en'"""
    return f"{show}-{target_language.strip()[:2].lower()}"


class SentencePipeline:
    """
    Serves sentences from subtitle files, caching each file's candidates.

    The cache is the only state shared between requests; everything else is
    recomputed per call, so one pipeline can serve concurrent requests.
    """

    def __init__(
        self,
        cache: CacheManager,
        proficiency_filter: Optional[ProficiencyFilter] = None,
        cleaner: Optional[SubtitleCleaner] = None,
        segmenter: Optional[SentenceSegmenter] = None,
        encoding: Optional[str] = None,
        show_catalog: Optional[Dict[str, str]] = None,
        catalog_root: Optional[Union[str, Path]] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            cache: Corpus cache shared by all requests
            proficiency_filter: Tier filter (default: spaCy-backed)
            cleaner: Line cleaner (default: configured denylist)
            segmenter: Sentence segmenter (default: configured abbreviations)
            encoding: Subtitle encoding override ('auto' to detect)
            show_catalog: '<show>-<lang>' to subtitle path (default: from settings)
            catalog_root: Base directory for relative catalog paths (default: cwd)
            rng: Random source for selection (default: unseeded)
        """
        self.cache = cache
        self.proficiency_filter = proficiency_filter or ProficiencyFilter()
        self.cleaner = cleaner or SubtitleCleaner()
        self.segmenter = segmenter or SentenceSegmenter()
        self.encoding = encoding
        self.show_catalog = show_catalog if show_catalog is not None else settings.get_show_catalog()
        self.catalog_root = Path(catalog_root) if catalog_root else Path.cwd()
        self.rng = rng

    def parse_candidates(self, file_path: str) -> List[str]:
        """
        Ingest, clean and segment a subtitle file without touching the cache.

        Raises:
            SubtitleNotFoundError, SubtitleFormatError, SubtitleEncodingError,
            SubtitleParseError: If the file cannot be read as subtitles
        """
        corpus = self.cleaner.clean(iter_subtitle_lines(file_path, encoding=self.encoding))
        return self.segmenter.segment(corpus)

    def load_candidates(self, file_path: str) -> Tuple[List[str], bool]:
        """
        Get a file's candidate sentences from the cache or by parsing it.

        Concurrent misses for one file may both parse and both store; the
        results are identical, so the last write wins.

        Returns:
            Tuple of (candidate sentences, whether they came from the cache)
        """
        key = self.cache.get_subtitle_key(str(file_path))
        candidates = self.cache.get(key)
        if candidates is not None:
            return candidates, True

        candidates = self.parse_candidates(str(file_path))
        self.cache.set(key, candidates)
        logger.info(f"Parsed {len(candidates)} candidate sentences from {file_path}")
        return candidates, False

    def fetch_sentence(self, file_path: str, proficiency_level: str) -> SentenceResult:
        """
        Pick a random sentence suitable for a proficiency level.

        Args:
            file_path: Path to the subtitle file
            proficiency_level: 'beginner' or 'intermediate'; other values
                yield no sentence

        Returns:
            SentenceResult with the sentence (or None) and the cache flag

        Raises:
            SubtitleNotFoundError, SubtitleFormatError, SubtitleEncodingError,
            SubtitleParseError: If the file cannot be read as subtitles
        """
        start_time = time.perf_counter()
        candidates, from_cache = self.load_candidates(file_path)
        load_time = time.perf_counter()

        accepted = self.proficiency_filter.filter(candidates, proficiency_level)
        filter_time = time.perf_counter()

        sentence = select_sentence(accepted, rng=self.rng)

        logger.debug(
            f"Candidates {'cached' if from_cache else 'parsed'} in {load_time - start_time:.3f}s, "
            f"filtering took {filter_time - load_time:.3f}s"
        )
        if sentence is None:
            logger.info(f"No {proficiency_level} sentence available in {file_path}")

        return SentenceResult(sentence=sentence, from_cache=from_cache)

    def resolve_show(self, show: str, target_language: str) -> Path:
        """
        Look up the subtitle file registered for a show and language.

        Raises:
            ShowNotFoundError: If the catalog has no entry
        """
        catalog_key = get_catalog_key(show, target_language)
        relative_path = self.show_catalog.get(catalog_key)
        if not relative_path:
            raise ShowNotFoundError(show, catalog_key)
        return self.catalog_root / relative_path

    def fetch_sentence_for_show(self, show: str, target_language: str, proficiency_level: str) -> SentenceResult:
        """Fetch a sentence from the subtitle file registered for a show"""
        return self.fetch_sentence(str(self.resolve_show(show, target_language)), proficiency_level)
