"""
SRT parser
Reads SubRip text into captions
"""

import re

from loguru import logger

from subsniff.caption import Caption, Subtitle
from subsniff.formats.base import SubtitleFormat
from subsniff.timing import parse_srt_time

TIMING_LINE = re.compile(
    r"^\s*(\d{1,3}:\d{2}:\d{2}[,.]\d{1,3})\s*-->\s*(\d{1,3}:\d{2}:\d{2}[,.]\d{1,3})"
)


class SRTParser(SubtitleFormat):
    """Simple SRT parser"""

    name = "srt"

    def looks_like(self, text: str) -> bool:
        """An index line directly followed by a timing line"""
        lines = self.leading_lines(text, 2)
        if len(lines) < 2:
            return False
        return lines[0].strip().isdigit() and TIMING_LINE.match(lines[1]) is not None

    def parse(self, text: str) -> Subtitle:
        """Parse SRT text; malformed blocks are skipped"""
        captions = []

        content = text.strip()
        if not content:
            return Subtitle(captions)

        # Split on blank lines only when the next line looks like an index,
        # so blank lines inside a caption's text survive.
        blocks = re.split(r"\n\s*\n(?=\s*\d+\s*\n)", content)

        for block in blocks:
            if not block.strip():
                continue

            lines = block.strip().split("\n")
            # A valid entry needs at least an index, a timestamp, and text.
            if len(lines) < 3:
                logger.warning("skipping SRT block without text: {!r}", lines[0])
                continue

            try:
                seq = int(lines[0].strip())

                time_match = TIMING_LINE.match(lines[1])
                if not time_match:
                    logger.warning("skipping SRT block {} with bad timing line", seq)
                    continue

                start = parse_srt_time(time_match.group(1))
                end = parse_srt_time(time_match.group(2))

            except ValueError as e:
                logger.warning("skipping malformed SRT block: {}", e)
                continue

            text_lines = [line.rstrip() for line in lines[2:]]
            captions.append(Caption(seq=seq, start=start, end=end, text=text_lines))

        return Subtitle(captions)
