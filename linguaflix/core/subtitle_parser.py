import logging
from pathlib import Path
from typing import Iterator, Optional

import chardet
import pysrt

from linguaflix import settings
from linguaflix.core.subtitle_exceptions import (
    SubtitleNotFoundError,
    SubtitleFormatError,
    SubtitleEncodingError,
    SubtitleParseError
)

logger = logging.getLogger(__name__)

# Only SubRip is ingested
SUPPORTED_FORMATS = {'.srt'}


def validate_subtitle_file(file_path: str) -> Path:
    """
    Validate subtitle file existence and format.

    Args:
        file_path: Path to the subtitle file

    Returns:
        The validated path

    Raises:
        SubtitleNotFoundError: If file doesn't exist
        SubtitleFormatError: If the path is not a file or not a SubRip file
    """
    path = Path(file_path)

    if not path.exists():
        raise SubtitleNotFoundError(str(path))

    if not path.is_file():
        raise SubtitleFormatError(
            format_type="unknown",
            reason=f"Path exists but is not a file: {path}"
        )

    file_extension = path.suffix.lower()
    if file_extension not in SUPPORTED_FORMATS:
        supported = ", ".join(sorted(SUPPORTED_FORMATS))
        raise SubtitleFormatError(
            format_type=file_extension or "unknown",
            reason=f"Unsupported format. Supported formats: {supported}"
        )

    logger.debug(f"Subtitle file validated: {path}")
    return path


def detect_encoding(file_path: str, sample_size: Optional[int] = None) -> str:
    """
    Detect file encoding with chardet from the leading bytes of the file.

    Only a bounded sample is read so detection cost does not grow with the
    episode length.

    Args:
        file_path: Path to the subtitle file
        sample_size: Number of bytes to inspect (default: from settings)

    Returns:
        Detected encoding (e.g., 'utf-8', 'windows-1252')

    Raises:
        SubtitleEncodingError: If encoding cannot be detected
    """
    sample_size = sample_size or settings.get_encoding_sample_size()

    with open(file_path, 'rb') as f:
        raw_data = f.read(sample_size)

    result = chardet.detect(raw_data)
    if result['encoding'] is None:
        raise SubtitleEncodingError(
            path=file_path,
            attempted_encodings=['auto-detection failed']
        )

    logger.debug(f"Detected encoding: {result['encoding']} (confidence: {result['confidence']:.2%})")
    return result['encoding']


def _resolve_encoding(file_path: str, encoding: Optional[str]) -> str:
    encoding = encoding or settings.get_subtitle_encoding()
    if encoding != 'auto':
        return encoding

    try:
        return detect_encoding(file_path)
    except SubtitleEncodingError:
        logger.warning("Failed to detect encoding, trying UTF-8")
        return 'utf-8'


def iter_subtitle_lines(file_path: str, encoding: Optional[str] = None, strict: bool = False) -> Iterator[str]:
    """
    Stream the text lines of every cue in a SubRip file.

    Cues are read one at a time with pysrt, so cue indices and timestamp
    lines never reach the caller and memory stays bounded by the largest cue.

    Args:
        file_path: Path to the subtitle file
        encoding: Text encoding, or 'auto' to detect (default: from settings)
        strict: Raise on malformed cues instead of skipping them

    Yields:
        Raw cue text lines, in file order

    Raises:
        SubtitleNotFoundError: If file doesn't exist
        SubtitleFormatError: If the path is not a SubRip file
        SubtitleEncodingError: If the content cannot be decoded
        SubtitleParseError: If a cue is malformed and strict is set
    """
    path = validate_subtitle_file(file_path)
    encoding = _resolve_encoding(str(path), encoding)
    error_handling = pysrt.SubRipFile.ERROR_RAISE if strict else pysrt.SubRipFile.ERROR_PASS

    cue_count = 0
    with open(path, 'r', encoding=encoding) as handle:
        try:
            for item in pysrt.SubRipFile.stream(handle, error_handling=error_handling):
                cue_count += 1
                for line in item.text.splitlines():
                    yield line
        except UnicodeDecodeError as e:
            raise SubtitleEncodingError(
                path=str(path),
                attempted_encodings=[encoding]
            ) from e
        except pysrt.Error as e:
            raise SubtitleParseError.from_pysrt(str(path), e) from e

    logger.debug(f"Streamed {cue_count} cues from {path}")
