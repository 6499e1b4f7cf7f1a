"""
Subtitle format sniffer and dispatcher
Decodes bytes, guesses the dialect from cheap signatures and runs its parser
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from loguru import logger

from subsniff.caption import Subtitle
from subsniff.encoding import convert_to_utf8
from subsniff.exceptions import (
    EncodingError,
    ParseError,
    SubtitleFormatError,
    UnrecognizedFormatError,
)
from subsniff.formats import (
    CaptureParser,
    DCSubParser,
    SRTParser,
    SSAParser,
    SubtitleFormat,
    VTTParser,
)

# Signatures overlap on hybrid or malformed files; the first match wins.
FORMATS: Tuple[SubtitleFormat, ...] = (
    CaptureParser(),
    SSAParser(),
    DCSubParser(),
    SRTParser(),
    VTTParser(),
)


def detect_format(
    text: str, formats: Sequence[SubtitleFormat] = FORMATS
) -> Optional[SubtitleFormat]:
    """Return the first format whose signature matches the normalized text"""
    for subtitle_format in formats:
        if subtitle_format.looks_like(text):
            return subtitle_format
    return None


def parse_text(text: str, formats: Sequence[SubtitleFormat] = FORMATS) -> Subtitle:
    """
    Parse already normalized text

    Raises:
        UnrecognizedFormatError: no signature matched
        ParseError: the selected parser rejected the content
    """
    subtitle_format = detect_format(text, formats)
    if subtitle_format is None:
        raise UnrecognizedFormatError()

    logger.debug("parsing as {}", subtitle_format.name)
    try:
        return subtitle_format.parse(text)
    except SubtitleFormatError as e:
        raise ParseError(str(e), stage=subtitle_format.name) from e


def parse(data: bytes) -> Subtitle:
    """
    Parse a subtitle of unknown encoding and format

    Raises:
        ParseError: decoding failed (stage "encoding"), the format is
            unrecognized, or the format parser failed
    """
    try:
        text = convert_to_utf8(data)
    except EncodingError as e:
        raise ParseError(
            "failed to convert to utf8: %s" % e, stage="encoding"
        ) from e

    return parse_text(text)


def looks_like_text_subtitle(source: Union[bytes, bytearray, str, os.PathLike]) -> bool:
    """
    Tell whether bytes, or the file at a path, look like a known subtitle format

    Raises:
        OSError: the file could not be read
        EncodingError: the content could not be decoded
    """
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        data = Path(source).read_bytes()

    text = convert_to_utf8(data)
    return detect_format(text) is not None
