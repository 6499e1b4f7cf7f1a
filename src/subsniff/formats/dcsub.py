"""
DCSubtitle parser
Reads Digital Cinema (Interop) XML subtitles into captions
"""

import re
import xml.etree.ElementTree as ET
from typing import List

from subsniff.caption import Caption, Subtitle
from subsniff.exceptions import SubtitleFormatError
from subsniff.formats.base import SubtitleFormat
from subsniff.timing import parse_dcsub_time

XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


class DCSubParser(SubtitleFormat):
    """Parser for DCSubtitle XML documents"""

    name = "dcsub"

    def looks_like(self, text: str) -> bool:
        return "<DCSubtitle" in self.sniff_window(text)

    def parse(self, text: str) -> Subtitle:
        # The text is already decoded, the declared encoding no longer applies
        document = XML_DECLARATION.sub("", text, count=1)
        try:
            root = ET.fromstring(document)
        except ET.ParseError as e:
            raise SubtitleFormatError("invalid XML: %s" % e, self.name) from e

        captions: List[Caption] = []
        for element in root.iter("Subtitle"):
            spot = element.get("SpotNumber")
            time_in = element.get("TimeIn")
            time_out = element.get("TimeOut")
            if time_in is None or time_out is None:
                raise SubtitleFormatError(
                    "subtitle %s lacks TimeIn/TimeOut" % spot, self.name
                )

            try:
                seq = int(spot) if spot else len(captions) + 1
                start = parse_dcsub_time(time_in)
                end = parse_dcsub_time(time_out)
            except ValueError as e:
                raise SubtitleFormatError(str(e), self.name) from e

            lines = ["".join(node.itertext()).strip() for node in element.iter("Text")]
            captions.append(Caption(seq=seq, start=start, end=end, text=lines))

        return Subtitle(captions)
