"""
Linguistic analysis of candidate sentences.

Tokenizes a sentence and groups its terms by coarse part of speech using a
spaCy pipeline (Universal POS tags). The tagger is pluggable: anything that
maps a sentence to (text, pos) pairs can stand in for spaCy.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from linguaflix import settings

logger = logging.getLogger(__name__)

Tagger = Callable[[str], Iterable[Tuple[str, str]]]

NOUN_TAGS = {"NOUN", "PROPN", "PRON"}
VERB_TAGS = {"VERB", "AUX"}
ADJECTIVE_TAGS = {"ADJ"}
ADVERB_TAGS = {"ADV"}
CONJUNCTION_TAGS = {"CCONJ", "SCONJ"}
NON_TERM_TAGS = {"PUNCT", "SPACE"}


@dataclass(frozen=True)
class AnalyzedSentence:
    """Part-of-speech view of one candidate sentence"""
    sentence: str
    terms: Tuple[str, ...]
    nouns: Tuple[str, ...]
    verbs: Tuple[str, ...]
    modifiers: Tuple[str, ...]
    conjunctions: Tuple[str, ...]
    complex_word_count: int

    @property
    def term_count(self) -> int:
        return len(self.terms)

    def group(self, name: str) -> Tuple[str, ...]:
        """Get a POS group by name ('nouns', 'verbs', 'modifiers', 'conjunctions')"""
        return getattr(self, name)


class SpacyTagger:
    """Lazily loaded spaCy pipeline used as a tagger"""

    def __init__(self, model_name: Optional[str] = None):
        self.model_name = model_name or settings.get_spacy_model()
        self._nlp = None
        self._lock = threading.Lock()

    def _load(self):
        with self._lock:
            if self._nlp is None:
                import spacy

                logger.info(f"Loading spaCy model: {self.model_name}")
                self._nlp = spacy.load(self.model_name, disable=["parser", "ner"])
        return self._nlp

    def __call__(self, sentence: str) -> List[Tuple[str, str]]:
        nlp = self._nlp or self._load()
        return [(token.text, token.pos_) for token in nlp(sentence)]


class SentenceAnalyzer:
    """Extracts term counts and POS groups from sentences"""

    def __init__(self, tagger: Optional[Tagger] = None, complex_word_length: Optional[int] = None):
        """
        Args:
            tagger: Callable returning (text, pos) pairs (default: SpacyTagger)
            complex_word_length: Terms longer than this count as complex
        """
        self.tagger = tagger or SpacyTagger()
        self.complex_word_length = complex_word_length or settings.get_complex_word_length()

    def analyze(self, sentence: str) -> AnalyzedSentence:
        """
        Analyze one sentence.

        Args:
            sentence: Candidate sentence text (not modified)

        Returns:
            AnalyzedSentence with terms and POS groups in sentence order
        """
        terms, nouns, verbs, adjectives, adverbs, conjunctions = [], [], [], [], [], []

        for text, pos in self.tagger(sentence):
            if pos in NON_TERM_TAGS or not text.strip():
                continue
            terms.append(text)
            if pos in NOUN_TAGS:
                nouns.append(text)
            elif pos in VERB_TAGS:
                verbs.append(text)
            elif pos in ADJECTIVE_TAGS:
                adjectives.append(text)
            elif pos in ADVERB_TAGS:
                adverbs.append(text)
            elif pos in CONJUNCTION_TAGS:
                conjunctions.append(text)

        return AnalyzedSentence(
            sentence=sentence,
            terms=tuple(terms),
            nouns=tuple(nouns),
            verbs=tuple(verbs),
            modifiers=tuple(adjectives + adverbs),
            conjunctions=tuple(conjunctions),
            complex_word_count=sum(1 for term in terms if len(term) > self.complex_word_length)
        )
