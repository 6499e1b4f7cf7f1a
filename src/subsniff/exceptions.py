"""Exception hierarchy for subtitle decoding and parsing."""

from typing import Optional


class SubtitleError(Exception):
    """Base error for everything raised by subsniff."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EncodingError(SubtitleError):
    """Raised when raw bytes cannot be turned into text."""


class DetectionError(EncodingError):
    """Raised when the charset detector fails or has nothing to inspect."""


class UnsupportedCharsetError(EncodingError):
    """Raised when the detector is confident about a charset we do not decode."""

    def __init__(self, charset: str, confidence: float) -> None:
        message = "unhandled charset %r (confidence %.1f)" % (charset, confidence)
        super().__init__(message)
        self.charset = charset
        self.confidence = confidence


class SubtitleFormatError(SubtitleError):
    """Raised by a structural parser on content it cannot read."""

    def __init__(self, message: str, format_name: str) -> None:
        super().__init__("%s: %s" % (format_name, message))
        self.format_name = format_name


class ParseError(SubtitleError):
    """Raised by the dispatcher, carrying the stage that failed."""

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        text = "parse: %s" % message
        super().__init__(text)
        self.stage = stage


class UnrecognizedFormatError(ParseError):
    """Raised when decoded text matches none of the known subtitle formats."""

    def __init__(self) -> None:
        super().__init__("unrecognized subtitle type", stage="sniff")


class ConfigurationError(SubtitleError):
    """Raised when a configuration value is invalid."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key
