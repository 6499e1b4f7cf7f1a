"""
Closed-caption capture parser
Reads pipe-separated caption transcripts as written by caption capture tools

Each line holds START|END|CHANNEL|MODE|TEXT, for example

    00:00:02,169|00:00:04,170|CC1|POP|Hello there.

The channel (CC1-CC4, T1-T4) and the caption mode (POP, PAI, RU2...) are
optional and ignored. Everything after them is caption text, pipes included.
Consecutive lines sharing the same start and end form one caption.
"""

import re
from typing import List

from subsniff.caption import Caption, Subtitle
from subsniff.exceptions import SubtitleFormatError
from subsniff.formats.base import SubtitleFormat
from subsniff.timing import parse_srt_time

TIME = r"\d{2}:\d{2}:\d{2}[,.]\d{3}"
CAPTURE_LINE = re.compile(
    r"^(%s)\|(%s)\|"
    r"(?:(?:CC|T)[1-4]\|)?"
    r"(?:(?:POP|PAI|RU[1-4])\|)?"
    r"(.*)$" % (TIME, TIME)
)


class CaptureParser(SubtitleFormat):
    """Parser for closed-caption capture transcripts"""

    name = "capture"

    def looks_like(self, text: str) -> bool:
        line = self.first_line(text)
        return line is not None and CAPTURE_LINE.match(line) is not None

    def parse(self, text: str) -> Subtitle:
        captions: List[Caption] = []

        for number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line:
                continue

            match = CAPTURE_LINE.match(line)
            if not match:
                raise SubtitleFormatError(
                    "line %d is not a timed caption line: %r" % (number, line),
                    self.name,
                )

            try:
                start = parse_srt_time(match.group(1))
                end = parse_srt_time(match.group(2))
            except ValueError as e:
                raise SubtitleFormatError("line %d: %s" % (number, e), self.name) from e

            caption_text = match.group(3).strip()

            previous = captions[-1] if captions else None
            if previous is not None and previous.start == start and previous.end == end:
                previous.text.append(caption_text)
                continue

            captions.append(
                Caption(seq=len(captions) + 1, start=start, end=end, text=[caption_text])
            )

        return Subtitle(captions)
