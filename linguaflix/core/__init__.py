"""
Linguaflix Core Module

This module contains the subtitle-to-sentence pipeline: ingestion, cleaning,
segmentation, analysis, proficiency filtering, selection and caching.
"""

from .cache_manager import CacheManager
from .proficiency_filter import ProficiencyFilter
from .sentence_analyzer import SentenceAnalyzer
from .sentence_pipeline import SentencePipeline
from .sentence_segmenter import SentenceSegmenter
from .subtitle_cleaner import SubtitleCleaner
from .subtitle_parser import iter_subtitle_lines

__all__ = [
    'CacheManager',
    'ProficiencyFilter',
    'SentenceAnalyzer',
    'SentencePipeline',
    'SentenceSegmenter',
    'SubtitleCleaner',
    'iter_subtitle_lines'
]
