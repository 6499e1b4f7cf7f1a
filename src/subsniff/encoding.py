"""
Character encoding normalizer
Turns subtitle bytes of unknown provenance into text with \\n line breaks
"""

import codecs
from dataclasses import dataclass
from typing import Optional

import chardet
from loguru import logger

from subsniff.config.config import config
from subsniff.exceptions import DetectionError, UnsupportedCharsetError

UTF8_MARKER = b"\xef\xbb\xbf"
UTF16BE_MARKER = b"\xfe\xff"
UTF16LE_MARKER = b"\xff\xfe"

# å ä ö Ä Å Ö in ISO-8859-1
SWEDISH_LATIN1_BYTES = (0xE5, 0xE4, 0xF6, 0xC4, 0xC5, 0xD6)

# Canonical Python codec names, see canonical_charset
LATIN1_CHARSETS = frozenset(("iso8859-1", "cp1252"))
UTF8_CHARSETS = frozenset(("utf-8", "utf-8-sig", "ascii"))


@dataclass(frozen=True)
class DetectedCharset:
    """Best guess of the statistical detector, confidence on a 0-100 scale"""

    charset: Optional[str]
    confidence: float


def detect_charset(data: bytes) -> DetectedCharset:
    """
    Run statistical charset detection over the whole byte string

    Raises:
        DetectionError: when there is nothing to inspect or the detector fails
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("expected bytes, got %s" % type(data).__name__)
    if not data:
        raise DetectionError("failed to detect character type: empty input")

    try:
        result = chardet.detect(bytes(data))
    except Exception as e:
        raise DetectionError(f"failed to detect character type: {e}") from e

    confidence = (result.get("confidence") or 0.0) * 100
    return DetectedCharset(charset=result.get("encoding"), confidence=confidence)


def has_utf8_marker(data: bytes) -> bool:
    return data[:3] == UTF8_MARKER


def has_utf16be_marker(data: bytes) -> bool:
    return data[:2] == UTF16BE_MARKER


def has_utf16le_marker(data: bytes) -> bool:
    return data[:2] == UTF16LE_MARKER


def is_valid_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def latin1_to_utf8(data: bytes) -> str:
    """Map every byte to the code point of the same value"""
    return data.decode("latin-1")


def utf16_to_utf8(data: bytes, big_endian: bool) -> Optional[str]:
    """
    Decode UTF-16 code units, dropping a leading marker if present

    Returns None for an odd number of payload bytes.
    """
    marker = UTF16BE_MARKER if big_endian else UTF16LE_MARKER
    if data[:2] == marker:
        data = data[2:]
    if len(data) % 2 != 0:
        return None
    return data.decode("utf-16-be" if big_endian else "utf-16-le", errors="replace")


def looks_like_latin1(data: bytes, min_percent: Optional[float] = None) -> bool:
    """
    Guess Latin-1 from the share of Swedish accented letters

    Only å ä ö Å Ä Ö are counted, so Latin-1 text in other languages
    is not recognized.
    """
    if not data:
        return False
    if min_percent is None:
        min_percent = config.latin1_min_percent

    swedish = sum(data.count(value) for value in SWEDISH_LATIN1_BYTES)
    percent = swedish * 100.0 / len(data)
    return percent >= min_percent


def _decode_utf8(data: bytes) -> Optional[str]:
    if has_utf8_marker(data):
        return data[3:].decode("utf-8", errors="replace")
    if is_valid_utf8(data):
        return data.decode("utf-8")
    return None


def canonical_charset(name: str) -> str:
    """
    Map a detector charset name onto Python's codec name

    ISO-8859-1, latin-1 and iso8859-1 all become iso8859-1. Names without
    a Python codec are returned lower-cased.
    """
    try:
        return codecs.lookup(name).name
    except LookupError:
        return name.lower()


def _decode_detected(data: bytes, detected: DetectedCharset) -> Optional[str]:
    """Decode according to a trusted detector verdict, None when unresolved"""
    charset = canonical_charset(detected.charset)

    if charset in LATIN1_CHARSETS:
        return latin1_to_utf8(data)
    if charset == "utf-16-be":
        return utf16_to_utf8(data, big_endian=True)
    if charset == "utf-16-le":
        return utf16_to_utf8(data, big_endian=False)
    if charset == "utf-16":
        # chardet reports marker-prefixed UTF-16 without byte order
        if has_utf16be_marker(data):
            return utf16_to_utf8(data, big_endian=True)
        if has_utf16le_marker(data):
            return utf16_to_utf8(data, big_endian=False)
        return None
    if charset in UTF8_CHARSETS:
        return _decode_utf8(data)

    raise UnsupportedCharsetError(detected.charset, detected.confidence)


def _decode_fallback(data: bytes) -> str:
    """Inspect byte patterns directly when the detector verdict is not usable"""
    text = None
    if has_utf16be_marker(data):
        text = utf16_to_utf8(data, big_endian=True)
    elif has_utf16le_marker(data):
        text = utf16_to_utf8(data, big_endian=False)
    if text is not None:
        return text

    text = _decode_utf8(data)
    if text is not None:
        return text

    if looks_like_latin1(data):
        logger.debug("fallback: Swedish letters suggest Latin-1")
        return latin1_to_utf8(data)

    logger.debug("fallback: decoding raw bytes with replacement characters")
    return data.decode("utf-8", errors="replace")


def normalize_line_feeds(text: str, window: Optional[int] = None) -> str:
    """
    Return text with \\n line feeds

    Only the first `window` characters decide the style: no \\n and at least
    one \\r there means classic Mac line breaks and every \\r is replaced.
    Otherwise only \\r\\n pairs are collapsed; a lone \\r stays.
    """
    if window is None:
        window = config.line_ending_window

    sample = text[:window]
    if "\n" not in sample and "\r" in sample:
        return text.replace("\r", "\n")

    return text.replace("\r\n", "\n")


def convert_to_utf8(data: bytes) -> str:
    """
    Decode subtitle bytes of unknown encoding into normalized text

    Raises:
        DetectionError: the charset detector failed
        UnsupportedCharsetError: the detector is confident about a charset
            that is not decoded here
    """
    detected = detect_charset(data)
    data = bytes(data)
    logger.debug(
        "detected charset {} with confidence {:.1f}",
        detected.charset,
        detected.confidence,
    )

    text = None
    if detected.charset and detected.confidence > config.confidence_threshold:
        text = _decode_detected(data, detected)

    if text is None:
        text = _decode_fallback(data)

    return normalize_line_feeds(text)
