"""
Subtitle line cleaning for Linguaflix

Turns raw cue text lines into one space-normalized corpus string:
annotations, markup and credit lines are removed and lines that subtitle
authors wrapped mid-sentence are merged back together.
"""
import re
import logging
from typing import Iterable, List, Optional, Sequence

from linguaflix import settings

logger = logging.getLogger(__name__)

BRACKETED_RE = re.compile(r"\[.*?\]")
HTML_TAG_RE = re.compile(r"<.*?>")
TIMECODE_RE = re.compile(
    r"\d{1,2}:\d{2}:\d{2}[,.]\d{1,3}\s*-->\s*\d{1,2}:\d{2}:\d{2}[,.]\d{1,3}"
)
# An unterminated note runs to the end of the line
MUSIC_RE = re.compile(r"[♪♫][^♪♫]*(?:[♪♫]|$)")
# A dash only marks dialogue when whitespace follows it ("-5 degrees" is kept)
DIALOGUE_DASH_RE = re.compile(r"^(?:-+(?:\s+|$))+")
NUMERIC_ONLY_RE = re.compile(r"^\d+$")
WHITESPACE_RE = re.compile(r"\s+")
CONTINUATION_RE = re.compile(r"^[a-z]")


class SubtitleCleaner:
    """Strips subtitle noise and merges wrapped dialogue lines"""

    def __init__(
        self,
        denylist: Optional[Sequence[str]] = None,
        recap_markers: Optional[Sequence[str]] = None
    ):
        """
        Args:
            denylist: Credit phrases; any line containing one is dropped
            recap_markers: Phrases that drop a line when it starts with them
        """
        config = settings.get_cleaner_config()
        if denylist is None:
            denylist = config.get('denylist', [])
        if recap_markers is None:
            recap_markers = config.get('recap_markers', [])

        self.denylist = [phrase.lower() for phrase in denylist]
        self.recap_markers = [marker.lower() for marker in recap_markers]

    def clean_line(self, line: str) -> str:
        """Remove annotations, markup, timecodes and music from one line"""
        cleaned = BRACKETED_RE.sub("", line)
        cleaned = HTML_TAG_RE.sub("", cleaned)
        cleaned = TIMECODE_RE.sub("", cleaned)
        cleaned = MUSIC_RE.sub("", cleaned)
        cleaned = WHITESPACE_RE.sub(" ", cleaned).strip()
        cleaned = DIALOGUE_DASH_RE.sub("", cleaned)
        if NUMERIC_ONLY_RE.match(cleaned):
            return ""
        return cleaned

    def is_noise(self, line: str) -> bool:
        """Check whether a cleaned line should be dropped entirely"""
        if not line:
            return True
        lowered = line.lower()
        if any(phrase in lowered for phrase in self.denylist):
            return True
        return any(lowered.startswith(marker) for marker in self.recap_markers)

    def merge_lines(self, lines: Iterable[str]) -> List[str]:
        """
        Append lines that start with a lowercase letter to the previous one.

        Args:
            lines: Cleaned, non-noise lines in cue order

        Returns:
            Logical lines in the same order
        """
        merged: List[str] = []
        for line in lines:
            if merged and CONTINUATION_RE.match(line):
                merged[-1] = f"{merged[-1]} {line}"
            else:
                merged.append(line)
        return merged

    def clean(self, lines: Iterable[str]) -> str:
        """
        Run the full cleaning pass.

        Merged logical lines are cleaned again, since an annotation or a
        credit wrapped over several cue lines only becomes whole once the
        lines are joined. The joined corpus gets one last inline pass for
        brackets opened and closed on lines that did not merge.

        Args:
            lines: Raw cue text lines

        Returns:
            The corpus as one string with whitespace runs collapsed
        """
        total = 0
        kept = []
        for raw_line in lines:
            total += 1
            cleaned = self.clean_line(raw_line)
            if self.is_noise(cleaned):
                continue
            kept.append(cleaned)

        logical = []
        for merged_line in self.merge_lines(kept):
            cleaned = self.clean_line(merged_line)
            if not self.is_noise(cleaned):
                logical.append(cleaned)

        logger.debug(f"Cleaned {total} raw lines into {len(logical)} logical lines")
        return self.clean_line(" ".join(logical))
