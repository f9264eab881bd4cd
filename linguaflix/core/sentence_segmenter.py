"""
Sentence segmentation for Linguaflix

Splits the cleaned corpus into candidate sentences with a small scanner over
terminal punctuation. Boundary detection is a heuristic: it avoids the common
false splits after initials, dotted acronyms and title abbreviations, but it is
not grammatically exact.
"""
import re
import logging
from typing import Iterable, List, Optional

from linguaflix import settings

logger = logging.getLogger(__name__)

TERMINALS = ".!?"
# Closing quotes and brackets stay with the sentence they end
CLOSERS = "\"')]”’"
OPENERS = "\"'([“‘"
DOTTED_ACRONYM_RE = re.compile(r"(?:\w\.)+\w")


class SentenceSegmenter:
    """Splits text into sentences on '.', '!' and '?'"""

    def __init__(self, abbreviations: Optional[Iterable[str]] = None):
        if abbreviations is None:
            abbreviations = settings.get_segmenter_config().get('abbreviations', [])
        self.abbreviations = {abbreviation.lower().rstrip('.') for abbreviation in abbreviations}

    def _word_before(self, text: str, index: int) -> str:
        start = index
        while start > 0 and not text[start - 1].isspace():
            start -= 1
        return text[start:index].lstrip(OPENERS)

    def is_abbreviation(self, word: str) -> bool:
        """
        Check whether a '.' after this word belongs to the word.

        Args:
            word: The characters between the previous whitespace and the dot
        """
        if len(word) == 1 and word.isalpha():
            return True
        if DOTTED_ACRONYM_RE.fullmatch(word):
            return True
        return word.lower() in self.abbreviations

    def segment(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: Space-normalized corpus text

        Returns:
            Non-empty, trimmed sentences in text order
        """
        sentences: List[str] = []
        start = 0
        index = 0
        length = len(text)

        while index < length:
            if text[index] not in TERMINALS:
                index += 1
                continue

            end = index
            while end + 1 < length and text[end + 1] in TERMINALS:
                end += 1
            single_dot = end == index and text[index] == '.'
            while end + 1 < length and text[end + 1] in CLOSERS:
                end += 1

            at_boundary = end + 1 == length or text[end + 1].isspace()
            if at_boundary and not (single_dot and self.is_abbreviation(self._word_before(text, index))):
                sentence = text[start:end + 1].strip()
                if sentence:
                    sentences.append(sentence)
                start = end + 1

            index = end + 1

        remainder = text[start:].strip()
        if remainder:
            sentences.append(remainder)

        logger.debug(f"Segmented {len(sentences)} candidate sentences")
        return sentences
