"""
Proficiency-based sentence filtering.

Each tier is a ProficiencyThreshold. Filtering runs in two passes: a cheap
whitespace word count rejects sentences that cannot qualify, then the
survivors are analyzed and checked against the full rule.

The two passes count differently (whitespace words vs. tagger terms), so a
sentence whose contractions split into extra terms can pass the pre-filter
and still fail on term count, and vice versa for punctuation-only words.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from linguaflix import settings
from linguaflix.models import ProficiencyThreshold
from linguaflix.core.sentence_analyzer import AnalyzedSentence, SentenceAnalyzer

logger = logging.getLogger(__name__)


def word_count_prefilter(sentence: str, threshold: ProficiencyThreshold) -> bool:
    """Check the whitespace-split word count against the tier's length bounds"""
    return threshold.length_in_bounds(len(sentence.split()))


def accepts(analyzed: AnalyzedSentence, threshold: ProficiencyThreshold) -> bool:
    """
    Apply the full acceptance rule to an analyzed sentence.

    Args:
        analyzed: Analysis of the candidate
        threshold: Tier bounds

    Returns:
        True if term count, complex words and required POS groups all pass
    """
    if not threshold.length_in_bounds(analyzed.term_count):
        return False
    if analyzed.complex_word_count > threshold.max_complex_words:
        return False
    return all(len(analyzed.group(name)) > 0 for name in threshold.required_pos)


class ProficiencyFilter:
    """Selects the candidate sentences suitable for a proficiency tier"""

    def __init__(
        self,
        analyzer: Optional[SentenceAnalyzer] = None,
        thresholds: Optional[Dict[str, ProficiencyThreshold]] = None,
        max_workers: Optional[int] = None
    ):
        """
        Args:
            analyzer: Sentence analyzer (default: spaCy-backed)
            thresholds: Tier name to threshold (default: from settings)
            max_workers: Threads used for analysis; 1 analyzes serially
        """
        self.analyzer = analyzer or SentenceAnalyzer()
        self.thresholds = thresholds if thresholds is not None else settings.get_proficiency_thresholds()
        self.max_workers = max_workers or settings.get_analysis_max_workers()

    def _analyze_all(self, sentences: Sequence[str]) -> List[AnalyzedSentence]:
        if self.max_workers <= 1 or len(sentences) <= 1:
            return [self.analyzer.analyze(sentence) for sentence in sentences]

        # map() yields in submission order regardless of completion order
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(self.analyzer.analyze, sentences))

    def filter(self, sentences: Sequence[str], level: str) -> List[str]:
        """
        Filter candidates for a tier.

        Args:
            sentences: Candidate sentences in corpus order
            level: Tier name, e.g. 'beginner' or 'intermediate'

        Returns:
            Accepted sentences in their original order; empty for unknown tiers
        """
        threshold = self.thresholds.get(level)
        if threshold is None:
            logger.warning(f"Unknown proficiency level: {level!r}")
            return []

        survivors = [sentence for sentence in sentences if word_count_prefilter(sentence, threshold)]
        accepted = [
            analyzed.sentence
            for analyzed in self._analyze_all(survivors)
            if accepts(analyzed, threshold)
        ]

        logger.debug(
            f"{level}: {len(sentences)} candidates, {len(survivors)} after word count, "
            f"{len(accepted)} accepted"
        )
        return accepted
