#!/usr/bin/env python3
"""
Subtitle-related exceptions for Linguaflix

This module defines custom exceptions for subtitle ingestion and show lookup errors.
"""
from typing import Optional


class SubtitleNotFoundError(FileNotFoundError):
    """
    Raised when a subtitle file doesn't exist at the specified path.
    
    Attributes:
        path: The path to the subtitle file that was not found
    """
    
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Subtitle file not found: {path}")


class SubtitleFormatError(ValueError):
    """
    Raised when a subtitle path is not a regular SubRip file.
    
    Attributes:
        format: The format that caused the error (e.g., '.vtt')
        reason: Description of why the format is invalid
    """
    
    def __init__(self, format_type: str, reason: str):
        self.format = format_type
        self.reason = reason
        super().__init__(f"Invalid {format_type} format: {reason}")


class SubtitleEncodingError(UnicodeError):
    """
    Raised when subtitle content cannot be decoded as text.
    
    Attributes:
        path: The path to the subtitle file
        attempted_encodings: List of encodings that were tried
    """
    
    def __init__(self, path: str, attempted_encodings: list = None):
        self.path = path
        self.attempted_encodings = attempted_encodings or []
        encodings_str = ", ".join(self.attempted_encodings) if self.attempted_encodings else "unknown"
        super().__init__(f"Failed to decode subtitle file '{path}'. Tried encodings: {encodings_str}")


class SubtitleParseError(ValueError):
    """
    Raised when a cue cannot be parsed while streaming a SubRip file.

    Attributes:
        path: The path to the subtitle file
        reason: Description of the parsing error
        end_line: 1-based number of the cue's last line, if known
        cue: Raw text of the offending cue block, if known
    """

    def __init__(self, path: str, reason: str, end_line: Optional[int] = None, cue: Optional[str] = None):
        self.path = path
        self.reason = reason
        self.end_line = end_line
        self.cue = cue
        location = f" (cue ending at line {end_line})" if end_line is not None else ""
        super().__init__(f"Failed to parse subtitle file '{path}'{location}: {reason}")

    @classmethod
    def from_pysrt(cls, path: str, error: Exception) -> "SubtitleParseError":
        """
        Build from an error raised by a strict pysrt stream.

        pysrt reports (line index, cue block) in the error args; the index is
        that of the blank line closing the cue.
        """
        end_line = None
        cue = None
        args = error.args
        if args and isinstance(args[0], int):
            end_line, args = args[0], args[1:]
        if args and isinstance(args[-1], str):
            cue = args[-1].strip() or None
        reason = type(error).__name__
        if cue:
            reason = f"{reason} in cue starting with '{cue.splitlines()[0]}'"
        return cls(path=path, reason=reason, end_line=end_line, cue=cue)


class ShowNotFoundError(LookupError):
    """
    Raised when no subtitle file is registered for a show and language.
    
    Attributes:
        show: Show name as requested
        catalog_key: The '<show>-<lang>' key that was looked up
    """
    
    def __init__(self, show: str, catalog_key: str):
        self.show = show
        self.catalog_key = catalog_key
        super().__init__(f"No subtitle registered for show '{show}' (key: {catalog_key})")
