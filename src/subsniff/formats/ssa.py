"""
SSA/ASS parser
Reads Dialogue events of SubStation Alpha scripts into captions
"""

import re
from typing import List

from subsniff.caption import Caption, Subtitle
from subsniff.exceptions import SubtitleFormatError
from subsniff.formats.base import SubtitleFormat
from subsniff.timing import parse_ssa_time

# Advanced SubStation Alpha v4+ event fields, used when no Format line is given
DEFAULT_EVENT_FORMAT = [
    "layer",
    "start",
    "end",
    "style",
    "name",
    "marginl",
    "marginr",
    "marginv",
    "effect",
    "text",
]

OVERRIDE_BLOCK = re.compile(r"\{[^}]*\}")
SECTION_HEADER = re.compile(r"^\[(.+)\]$")


def clean_event_text(raw: str) -> List[str]:
    """Strip override blocks and split on SSA line breaks"""
    text = OVERRIDE_BLOCK.sub("", raw)
    text = text.replace("\\h", " ")
    text = text.replace("\\N", "\n").replace("\\n", "\n")
    return [line.strip() for line in text.split("\n")]


class SSAParser(SubtitleFormat):
    """Parser for SSA and ASS scripts"""

    name = "ssa"

    def looks_like(self, text: str) -> bool:
        return "[script info]" in self.sniff_window(text).lower()

    def parse(self, text: str) -> Subtitle:
        captions: List[Caption] = []
        fields = DEFAULT_EVENT_FORMAT
        in_events = False

        for number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith(";"):
                continue

            section = SECTION_HEADER.match(line)
            if section:
                in_events = section.group(1).strip().lower() == "events"
                continue

            if not in_events or ":" not in line:
                continue

            key, value = line.split(":", 1)
            key = key.strip().lower()

            if key == "format":
                fields = [name.strip().lower() for name in value.split(",")]
                if "start" not in fields or "end" not in fields or fields[-1] != "text":
                    raise SubtitleFormatError(
                        "line %d: unusable event format %r" % (number, value.strip()),
                        self.name,
                    )
                continue

            if key != "dialogue":
                continue

            values = value.split(",", len(fields) - 1)
            if len(values) != len(fields):
                raise SubtitleFormatError(
                    "line %d: expected %d fields, got %d"
                    % (number, len(fields), len(values)),
                    self.name,
                )
            event = dict(zip(fields, values))

            try:
                start = parse_ssa_time(event["start"])
                end = parse_ssa_time(event["end"])
            except ValueError as e:
                raise SubtitleFormatError("line %d: %s" % (number, e), self.name) from e

            captions.append(
                Caption(
                    seq=len(captions) + 1,
                    start=start,
                    end=end,
                    text=clean_event_text(event["text"]),
                )
            )

        return Subtitle(captions)
