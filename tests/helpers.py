"""
Test doubles shared across the Linguaflix test suite
"""
import re

TOKEN_RE = re.compile(r"\w+(?:'\w+)?|[^\w\s]")

LEXICON = {
    "NOUN": {"dog", "boat", "captain", "station", "today", "tonight", "fire", "truck", "house", "coffee"},
    "PRON": {"you", "i", "we", "it", "he", "she", "they", "me", "everybody"},
    "VERB": {"runs", "need", "told", "leave", "go", "see", "love", "understands", "burns", "drink"},
    "AUX": {"is", "are", "was", "would", "do", "have"},
    "ADJ": {"bigger", "big", "red", "good", "old", "new", "hot"},
    "ADV": {"fast", "really", "never", "how", "there", "very", "completely", "obviously",
            "absolutely", "definitely", "certainly"},
    "DET": {"the", "a", "this"},
    "CCONJ": {"and", "but", "or"},
    "SCONJ": {"that", "because"},
    "INTJ": {"hello", "okay"},
}


class LexiconTagger:
    """Deterministic stand-in for spaCy: tags words from a fixed lexicon"""

    def __init__(self, lexicon=None):
        self.lookup = {}
        for pos, words in (lexicon or LEXICON).items():
            for word in words:
                self.lookup[word] = pos
        self.calls = []

    def __call__(self, sentence):
        self.calls.append(sentence)
        tags = []
        for token in TOKEN_RE.findall(sentence):
            if not re.match(r"\w", token):
                tags.append((token, "PUNCT"))
            else:
                tags.append((token, self.lookup.get(token.lower(), "X")))
        return tags


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
