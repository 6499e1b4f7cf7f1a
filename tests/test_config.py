"""Tests for configuration overrides"""

import pytest

from subsniff import encoding
from subsniff.config.config import ConfigManager, config
from subsniff.encoding import DetectedCharset, convert_to_utf8
from subsniff.exceptions import ConfigurationError


def test_defaults(monkeypatch):
    for key in (
        "SUBSNIFF_CONFIDENCE_THRESHOLD",
        "SUBSNIFF_LINE_ENDING_WINDOW",
        "SUBSNIFF_LATIN1_MIN_PERCENT",
        "SUBSNIFF_SNIFF_WINDOW",
    ):
        monkeypatch.delenv(key, raising=False)

    assert config.confidence_threshold == 50
    assert config.line_ending_window == 80
    assert config.latin1_min_percent == 1.0
    assert config.sniff_window == 4096


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("SUBSNIFF_CONFIDENCE_THRESHOLD", "high")
    with pytest.raises(ConfigurationError) as excinfo:
        config.confidence_threshold
    assert excinfo.value.key == "SUBSNIFF_CONFIDENCE_THRESHOLD"


def test_window_must_be_positive(monkeypatch):
    monkeypatch.setenv("SUBSNIFF_SNIFF_WINDOW", "0")
    with pytest.raises(ConfigurationError):
        config.sniff_window


def test_threshold_override(monkeypatch):
    monkeypatch.setattr(
        encoding, "detect_charset", lambda data: DetectedCharset("Big5", 60.0)
    )
    monkeypatch.setenv("SUBSNIFF_CONFIDENCE_THRESHOLD", "70")
    assert convert_to_utf8(b"hej") == "hej"


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    # restored to unset on teardown
    monkeypatch.setenv("SUBSNIFF_LATIN1_MIN_PERCENT", "unset")
    monkeypatch.delenv("SUBSNIFF_LATIN1_MIN_PERCENT")
    (tmp_path / ".env").write_text("SUBSNIFF_LATIN1_MIN_PERCENT=2.5\n")
    monkeypatch.chdir(tmp_path)

    manager = ConfigManager()

    assert manager.env_file == tmp_path / ".env"
    assert manager.latin1_min_percent == 2.5
