"""
Canonical caption model
Every format parser produces a Subtitle made of Caption entries
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterator, List

from subsniff.timing import format_srt_time, format_vtt_time


@dataclass
class Caption:
    """One timed subtitle unit"""

    seq: int
    start: timedelta
    end: timedelta
    text: List[str] = field(default_factory=list)

    def as_srt(self) -> str:
        """Render the caption as an SRT block, trailing blank line included"""
        start = format_srt_time(self.start)
        end = format_srt_time(self.end)
        body = "".join(line + "\n" for line in self.text)
        return f"{self.seq}\n{start} --> {end}\n{body}\n"

    def as_vtt(self) -> str:
        """Render the caption as a WebVTT cue"""
        start = format_vtt_time(self.start)
        end = format_vtt_time(self.end)
        body = "".join(line + "\n" for line in self.text)
        return f"{start} --> {end}\n{body}\n"


@dataclass
class Subtitle:
    """Captions in the order they appear in the source text"""

    captions: List[Caption] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.captions)

    def __iter__(self) -> Iterator[Caption]:
        return iter(self.captions)

    def as_srt(self) -> str:
        return "".join(caption.as_srt() for caption in self.captions)

    def as_vtt(self) -> str:
        return "WEBVTT\n\n" + "".join(caption.as_vtt() for caption in self.captions)
