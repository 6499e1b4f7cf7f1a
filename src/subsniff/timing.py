"""
Subtitle timestamp codecs
Parses every supported dialect's time notation into timedelta and formats it back
"""

import re
from datetime import timedelta

SRT_TIME_PATTERN = re.compile(r"^(\d{1,3}):(\d{2}):(\d{2})[,.](\d{1,3})$")
VTT_TIME_PATTERN = re.compile(r"^(?:(\d{1,3}):)?(\d{2}):(\d{2})\.(\d{1,3})$")
SSA_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2}):(\d{2})[.:](\d{1,2})$")
DCSUB_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2}):(\d{2})([:.])(\d{1,3})$")

# DCSubtitle counts the last field in ticks of 4 milliseconds
DCSUB_TICK_MS = 4


def _fraction_to_ms(fraction: str) -> int:
    """Read a fractional-second field as milliseconds ('5' -> 500, '45' -> 450)."""
    return int((fraction + "000")[:3])


def _build(hours: str, minutes: str, seconds: str, milliseconds: int) -> timedelta:
    return timedelta(
        hours=int(hours or 0),
        minutes=int(minutes),
        seconds=int(seconds),
        milliseconds=milliseconds,
    )


def parse_srt_time(time_str: str) -> timedelta:
    """
    Parse SRT time format (HH:MM:SS,mmm) to timedelta

    A dot is accepted in place of the comma.

    Raises:
        ValueError: when the string is not an SRT timestamp
    """
    match = SRT_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise ValueError(f"Invalid time format: {time_str}")

    hours, minutes, seconds, fraction = match.groups()
    return _build(hours, minutes, seconds, _fraction_to_ms(fraction))


def parse_vtt_time(time_str: str) -> timedelta:
    """Parse WebVTT time (HH:MM:SS.mmm or MM:SS.mmm) to timedelta"""
    match = VTT_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise ValueError(f"Invalid time format: {time_str}")

    hours, minutes, seconds, fraction = match.groups()
    return _build(hours, minutes, seconds, _fraction_to_ms(fraction))


def parse_ssa_time(time_str: str) -> timedelta:
    """Parse SSA/ASS time (H:MM:SS.cc, centiseconds) to timedelta"""
    match = SSA_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise ValueError(f"Invalid time format: {time_str}")

    hours, minutes, seconds, centis = match.groups()
    return _build(hours, minutes, seconds, _fraction_to_ms(centis.ljust(2, "0")))


def parse_dcsub_time(time_str: str) -> timedelta:
    """
    Parse DCSubtitle time to timedelta

    HH:MM:SS:ttt counts ticks of 4 ms, HH:MM:SS.mmm counts milliseconds.
    """
    match = DCSUB_TIME_PATTERN.match(time_str.strip())
    if not match:
        raise ValueError(f"Invalid time format: {time_str}")

    hours, minutes, seconds, separator, fraction = match.groups()
    if separator == ":":
        milliseconds = int(fraction) * DCSUB_TICK_MS
    else:
        milliseconds = _fraction_to_ms(fraction)
    return _build(hours, minutes, seconds, milliseconds)


def _split(td: timedelta):
    # Negative times collapse to zero
    if td.total_seconds() < 0:
        return 0, 0, 0, 0

    total_ms = td // timedelta(milliseconds=1)
    hours, rest = divmod(total_ms, 3600 * 1000)
    minutes, rest = divmod(rest, 60 * 1000)
    seconds, milliseconds = divmod(rest, 1000)
    return hours, minutes, seconds, milliseconds


def format_srt_time(td: timedelta) -> str:
    """Format timedelta as HH:MM:SS,mmm"""
    hours, minutes, seconds, milliseconds = _split(td)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"


def format_vtt_time(td: timedelta) -> str:
    """Format timedelta as HH:MM:SS.mmm"""
    hours, minutes, seconds, milliseconds = _split(td)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
