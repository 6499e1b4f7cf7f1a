"""
Shared pieces of the structural subtitle parsers
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from subsniff.caption import Subtitle
from subsniff.config.config import config


class SubtitleFormat(ABC):
    """
    A subtitle dialect: a cheap signature plus a structural parser

    Subclasses set `name` and implement `looks_like` and `parse`.
    """

    name = ""

    @abstractmethod
    def looks_like(self, text: str) -> bool:
        """Cheap structural check on a bounded prefix"""

    @abstractmethod
    def parse(self, text: str) -> Subtitle:
        """Parse normalized text, raising SubtitleFormatError on bad content"""

    @staticmethod
    def sniff_window(text: str) -> str:
        """Return the prefix of text that signatures are allowed to inspect"""
        return text[: config.sniff_window]

    @staticmethod
    def leading_lines(text: str, count: int) -> List[str]:
        """Return up to `count` lines after skipping leading blank lines"""
        lines = SubtitleFormat.sniff_window(text).lstrip().split("\n")
        return lines[:count]

    @staticmethod
    def first_line(text: str) -> Optional[str]:
        lines = SubtitleFormat.leading_lines(text, 1)
        return lines[0] if lines and lines[0] else None

    def __repr__(self) -> str:
        return "<%s %s>" % (type(self).__name__, self.name)
