"""
WebVTT parser
Reads WebVTT cues into captions
"""

from typing import List

from subsniff.caption import Caption, Subtitle
from subsniff.exceptions import SubtitleFormatError
from subsniff.formats.base import SubtitleFormat
from subsniff.timing import parse_vtt_time


class VTTParser(SubtitleFormat):
    """Parser for WebVTT subtitle text"""

    name = "vtt"

    def looks_like(self, text: str) -> bool:
        return self.sniff_window(text).lstrip().startswith("WEBVTT")

    def parse(self, text: str) -> Subtitle:
        """
        Parse WebVTT content and extract cues

        Parameters:
            text: Normalized WebVTT content

        Returns:
            Subtitle with cues numbered from 1 in file order
        """
        lines = text.split("\n")

        captions: List[Caption] = []
        line_pointer = 0

        while line_pointer < len(lines):
            while line_pointer < len(lines) and lines[line_pointer].strip() == "":
                line_pointer += 1

            if line_pointer >= len(lines):
                break

            current_line = lines[line_pointer].strip()

            # Header and metadata blocks run until the next blank line
            if current_line.startswith(("WEBVTT", "NOTE", "STYLE", "REGION")):
                line_pointer += 1
                while line_pointer < len(lines) and lines[line_pointer].strip() != "":
                    line_pointer += 1
                continue

            # Optional cue identifier
            if "-->" not in current_line:
                line_pointer += 1

            if line_pointer >= len(lines) or "-->" not in lines[line_pointer]:
                continue

            timestamp_line = lines[line_pointer]
            line_pointer += 1

            start_raw, end_part = timestamp_line.split("-->", 1)
            end_fields = end_part.split()
            if not end_fields:
                raise SubtitleFormatError(
                    "cue without end time: %r" % timestamp_line, self.name
                )

            try:
                start = parse_vtt_time(start_raw)
                end = parse_vtt_time(end_fields[0])
            except ValueError as e:
                raise SubtitleFormatError(str(e), self.name) from e

            text_lines = []
            while line_pointer < len(lines) and lines[line_pointer].strip() != "":
                text_lines.append(lines[line_pointer])
                line_pointer += 1

            captions.append(
                Caption(seq=len(captions) + 1, start=start, end=end, text=text_lines)
            )

        return Subtitle(captions)
