"""Tests for the caption model and timestamp codecs"""

from datetime import timedelta

import pytest

from subsniff.caption import Caption, Subtitle
from subsniff.timing import (
    format_srt_time,
    format_vtt_time,
    parse_dcsub_time,
    parse_srt_time,
    parse_ssa_time,
    parse_vtt_time,
)


def test_caption_as_srt():
    caption = Caption(
        seq=1,
        start=timedelta(minutes=55, seconds=40, milliseconds=920),
        end=timedelta(minutes=55, seconds=44, milliseconds=760),
        text=["Jag vill ha tillbaka den här sen."],
    )
    assert caption.as_srt() == (
        "1\n00:55:40,920 --> 00:55:44,760\nJag vill ha tillbaka den här sen.\n\n"
    )


def test_subtitle_as_vtt():
    sub = Subtitle(
        [
            Caption(1, timedelta(seconds=1), timedelta(seconds=2), ["a"]),
            Caption(2, timedelta(seconds=3), timedelta(seconds=4, milliseconds=5), ["b", "c"]),
        ]
    )
    assert sub.as_vtt() == (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:02.000\na\n\n"
        "00:00:03.000 --> 00:00:04.005\nb\nc\n\n"
    )
    assert sub.as_srt().count(" --> ") == 2
    assert len(sub) == 2
    assert [c.seq for c in sub] == [1, 2]


def test_format_does_not_cap_hours():
    assert format_srt_time(timedelta(hours=25, milliseconds=1)) == "25:00:00,001"


def test_format_clamps_negative():
    assert format_srt_time(timedelta(seconds=-3)) == "00:00:00,000"
    assert format_vtt_time(timedelta(seconds=-3)) == "00:00:00.000"


@pytest.mark.parametrize(
    "parse_time,value,expected",
    [
        (parse_srt_time, "01:02:03,004", timedelta(hours=1, minutes=2, seconds=3, milliseconds=4)),
        (parse_srt_time, "00:00:01.5", timedelta(milliseconds=1500)),
        (parse_vtt_time, "02:03.040", timedelta(minutes=2, seconds=3, milliseconds=40)),
        (parse_ssa_time, "1:00:00.99", timedelta(hours=1, milliseconds=990)),
        (parse_dcsub_time, "00:00:01:249", timedelta(seconds=1, milliseconds=996)),
    ],
)
def test_parse_times(parse_time, value, expected):
    assert parse_time(value) == expected


@pytest.mark.parametrize(
    "parse_time", [parse_srt_time, parse_vtt_time, parse_ssa_time, parse_dcsub_time]
)
def test_parse_times_reject_garbage(parse_time):
    with pytest.raises(ValueError):
        parse_time("garbage")
