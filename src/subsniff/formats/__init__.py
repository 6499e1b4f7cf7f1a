"""
Structural parsers, one per supported subtitle dialect
"""

from subsniff.formats.base import SubtitleFormat
from subsniff.formats.capture import CaptureParser
from subsniff.formats.dcsub import DCSubParser
from subsniff.formats.srt import SRTParser
from subsniff.formats.ssa import SSAParser
from subsniff.formats.vtt import VTTParser

__all__ = [
    "SubtitleFormat",
    "CaptureParser",
    "DCSubParser",
    "SRTParser",
    "SSAParser",
    "VTTParser",
]
