"""
subsniff
Decode subtitle files of unknown encoding and format into timed captions
"""

from loguru import logger

from subsniff.caption import Caption, Subtitle
from subsniff.encoding import DetectedCharset, convert_to_utf8, detect_charset
from subsniff.exceptions import (
    ConfigurationError,
    DetectionError,
    EncodingError,
    ParseError,
    SubtitleError,
    SubtitleFormatError,
    UnrecognizedFormatError,
    UnsupportedCharsetError,
)
from subsniff.parser import (
    FORMATS,
    detect_format,
    looks_like_text_subtitle,
    parse,
    parse_text,
)

__version__ = "1.0.0"

# Library logging stays silent until the application calls logger.enable("subsniff")
logger.disable("subsniff")

__all__ = [
    "Caption",
    "Subtitle",
    "DetectedCharset",
    "convert_to_utf8",
    "detect_charset",
    "ConfigurationError",
    "DetectionError",
    "EncodingError",
    "ParseError",
    "SubtitleError",
    "SubtitleFormatError",
    "UnrecognizedFormatError",
    "UnsupportedCharsetError",
    "FORMATS",
    "detect_format",
    "looks_like_text_subtitle",
    "parse",
    "parse_text",
]
