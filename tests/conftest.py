"""Shared subtitle samples"""

import pytest

SAMPLE_SRT = """1
00:55:40,920 --> 00:55:44,760
Jag vill ha tillbaka den här sen.

2
00:55:46,800 --> 00:55:50,800
-God natt.
-Kom nu. - God natt.

3
00:55:51,800 --> 00:55:55,800
Vi ses i morgon och tar nya tag.

4
00:58:25,000 --> 00:58:29,280
Textning: Anders Kaage
Svensk Medietext för SVT
"""

WANT_SRT = [
    "1\n00:55:40,920 --> 00:55:44,760\nJag vill ha tillbaka den här sen.\n\n",
    "2\n00:55:46,800 --> 00:55:50,800\n-God natt.\n-Kom nu. - God natt.\n\n",
    "3\n00:55:51,800 --> 00:55:55,800\nVi ses i morgon och tar nya tag.\n\n",
    "4\n00:58:25,000 --> 00:58:29,280\nTextning: Anders Kaage\nSvensk Medietext för SVT\n\n",
]

SAMPLE_SSA = """[Script Info]
Title: Sample
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, Bold, Italic
Style: Default,Arial,20,&H00FFFFFF,0,0

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.50,0:00:03.00,Default,,0,0,0,,{\\i1}Hello{\\i0}, world
Dialogue: 0,0:00:04.00,0:00:06.25,Default,,0,0,0,,First line\\NSecond line
"""

SAMPLE_VTT = """WEBVTT
Kind: captions

NOTE this is a comment
spanning two lines

intro
00:01.000 --> 00:04.000 align:start
Never drink liquid nitrogen.

00:00:05.500 --> 00:00:07.250
- It will perforate your stomach.
- You could die.
"""

SAMPLE_DCSUB = """<?xml version="1.0" encoding="UTF-8"?>
<DCSubtitle Version="1.0">
  <SubtitleID>40950d85-63eb-4ee2-b1e8-45c126601b94</SubtitleID>
  <MovieTitle>Sample</MovieTitle>
  <ReelNumber>1</ReelNumber>
  <Language>Swedish</Language>
  <Font Id="Font1" Size="42">
    <Subtitle SpotNumber="1" TimeIn="00:00:04:052" TimeOut="00:00:06:100" FadeUpTime="20" FadeDownTime="20">
      <Text VAlign="bottom" VPosition="10">Hej <Font Italic="yes">där</Font></Text>
    </Subtitle>
    <Subtitle SpotNumber="2" TimeIn="00:00:07:000" TimeOut="00:00:09:125" FadeUpTime="20" FadeDownTime="20">
      <Text VAlign="bottom" VPosition="16">Första raden</Text>
      <Text VAlign="bottom" VPosition="10">Andra raden</Text>
    </Subtitle>
  </Font>
</DCSubtitle>
"""

SAMPLE_CAPTURE = """00:00:02,169|00:00:04,170|CC1|POP|Previously on the show
00:00:02,169|00:00:04,170|CC1|POP|we met the family.
00:00:05,000|00:00:06,500|CC1|POP|[ MUSIC ]
"""


@pytest.fixture
def sample_srt_utf8():
    return SAMPLE_SRT.encode("utf-8")


@pytest.fixture
def sample_srt_latin1():
    return SAMPLE_SRT.encode("latin-1")


@pytest.fixture
def sample_srt_latin1_dos():
    return SAMPLE_SRT.replace("\n", "\r\n").encode("latin-1")
