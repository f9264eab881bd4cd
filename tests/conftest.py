"""
Shared fixtures for the Linguaflix test suite
"""
import pytest

from linguaflix.core.cache_manager import CacheManager
from linguaflix.core.proficiency_filter import ProficiencyFilter
from linguaflix.core.sentence_analyzer import SentenceAnalyzer
from linguaflix.core.sentence_pipeline import SentencePipeline
from linguaflix.models import ProficiencyThreshold
from tests.helpers import FakeClock, LexiconTagger


@pytest.fixture
def tagger():
    return LexiconTagger()


@pytest.fixture
def analyzer(tagger):
    return SentenceAnalyzer(tagger=tagger, complex_word_length=6)


@pytest.fixture
def thresholds():
    return {
        "beginner": ProficiencyThreshold(
            name="beginner",
            max_length=8,
            max_complex_words=2,
            required_pos=["nouns", "verbs", "modifiers"]
        ),
        "intermediate": ProficiencyThreshold(
            name="intermediate",
            min_length=9,
            max_length=15,
            max_complex_words=4
        ),
    }


@pytest.fixture
def proficiency_filter(analyzer, thresholds):
    return ProficiencyFilter(analyzer=analyzer, thresholds=thresholds, max_workers=1)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    cache_manager = CacheManager(
        default_ttl=86400,
        cleanup_interval=120,
        key_prefix="subtitle:",
        clock=clock,
        start_cleanup=False
    )
    yield cache_manager
    cache_manager.close()


@pytest.fixture
def pipeline(cache, proficiency_filter):
    return SentencePipeline(cache, proficiency_filter=proficiency_filter, encoding="utf-8", show_catalog={})


@pytest.fixture
def write_srt(tmp_path):
    """Write SubRip content built from cue texts and return its path"""

    def _write(cues, name="episode.srt"):
        blocks = []
        for index, text in enumerate(cues, start=1):
            start = f"00:00:{index:02d},000"
            end = f"00:00:{index:02d},900"
            blocks.append(f"{index}\n{start} --> {end}\n{text}\n")
        path = tmp_path / name
        path.write_text("\n".join(blocks), encoding="utf-8")
        return path

    return _write
