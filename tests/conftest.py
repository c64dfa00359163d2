"""Shared test fixtures for the ttml2srt test suite.

WHY: Most test modules need the same small set of TTML documents: the
plain two-paragraph document from the conversion contract, a prefixed
EBU-TT document with styles and 10/20-hour offsets, a default-namespace
TTML document with seconds-style times, and a broken one. Centralizing
them here keeps expectations consistent across modules.

HOW: Documents are module-level strings exposed through pytest
fixtures. clean_env clears the TTML2SRT_* variables for config and CLI
tests.

RULES:
- Expected outputs in tests use "\\n" and pass newline="\\n" explicitly
- Documents are indented like real producer output; whitespace between
  elements must never leak into cue text
"""

import pytest


TWO_PARAGRAPH_TTML = """<?xml version="1.0" encoding="UTF-8"?>
<tt xmlns="http://www.w3.org/ns/ttml">
  <body>
    <div>
      <p begin="00:00:01.000" end="00:00:03.000"><span>Hello</span></p>
      <p begin="00:00:04.500" end="00:00:06.000"><span>World</span></p>
    </div>
  </body>
</tt>
"""

TWO_PARAGRAPH_SRT = (
    "1\n"
    "00:00:01.000 --> 00:00:03.000\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:00:04.500 --> 00:00:06.000\n"
    "World\n"
)

EBU_TT_STYLED = """<?xml version="1.0" encoding="UTF-8"?>
<tt:tt xmlns:tt="http://www.w3.org/ns/ttml"
       xmlns:tts="http://www.w3.org/ns/ttml#styling"
       xmlns:ttp="http://www.w3.org/ns/ttml#parameter"
       ttp:timeBase="media" xml:lang="de">
  <tt:head>
    <tt:styling>
      <tt:style xml:id="defaultStyle" tts:fontFamily="Verdana" tts:color="#FFFFFF"/>
      <tt:style xml:id="textYellow" tts:color="#FFFF00"/>
      <tt:style xml:id="textCyan" tts:color="#00FFFF"/>
      <tt:style xml:id="textBlack" tts:color="#000000"/>
      <tt:style xml:id="textYellowBold" style="textYellow" tts:fontWeight="bold"/>
    </tt:styling>
  </tt:head>
  <tt:body>
    <tt:div>
      <tt:p xml:id="sub1" begin="10:00:01.000" end="10:00:03.500" style="defaultStyle">
        <tt:span style="textYellow">Guten Abend.</tt:span>
      </tt:p>
      <tt:p xml:id="sub2" begin="10:00:04.000" end="10:00:06.250" style="textCyan">
        <tt:span>Wie geht es Ihnen?</tt:span>
        <tt:span style="textBlack">Sehr gut.</tt:span>
      </tt:p>
      <tt:p xml:id="sub3" begin="20:00:07.000" end="20:00:08.000">
        <tt:span style="textYellowBold">Zweiter Teil.</tt:span>
      </tt:p>
    </tt:div>
  </tt:body>
</tt:tt>
"""

EBU_TT_STYLED_SRT = (
    "1\n"
    "00:00:01.000 --> 00:00:03.500\n"
    '<font color="#ffff00">Guten Abend.</font>\n'
    "\n"
    "2\n"
    "00:00:04.000 --> 00:00:06.250\n"
    '<font color="#00ffff">Wie geht es Ihnen?</font>\n'
    "Sehr gut.\n"
    "\n"
    "3\n"
    "00:00:07.000 --> 00:00:08.000\n"
    '<font color="#ffff00">Zweiter Teil.</font>\n'
)

SECONDS_TTML = """<?xml version="1.0" encoding="UTF-8"?>
<tt xmlns="http://www.w3.org/ns/ttml" xml:lang="en">
  <body>
    <div>
      <p begin="1.405s" end="3.2s">First line<br/>second line</p>
      <p begin="75.5s" end="80s"><span></span></p>
      <p begin="81s" dur="1500ms"><span>Last.</span></p>
    </div>
  </body>
</tt>
"""

MALFORMED_TTML = """<tt xmlns="http://www.w3.org/ns/ttml">
  <body>
    <div>
      <p begin="00:00:01.000" end="00:00:02.000"><span>Unclosed</span>
    </div>
  </body>
</tt>
"""


@pytest.fixture
def two_paragraph_ttml():
    """Plain TTML with two unstyled paragraphs."""
    return TWO_PARAGRAPH_TTML


@pytest.fixture
def ebu_tt_styled():
    """Prefixed EBU-TT with styles, 10-hour and 20-hour offsets."""
    return EBU_TT_STYLED


@pytest.fixture
def seconds_ttml():
    """Default-namespace TTML with seconds-style and dur-based times."""
    return SECONDS_TTML


@pytest.fixture
def malformed_ttml():
    """TTML with an unclosed <p> element."""
    return MALFORMED_TTML


@pytest.fixture
def two_paragraph_srt():
    """Expected SRT for two_paragraph_ttml with "\\n" terminators."""
    return TWO_PARAGRAPH_SRT


@pytest.fixture
def ebu_tt_styled_srt():
    """Expected SRT for ebu_tt_styled with "\\n" terminators."""
    return EBU_TT_STYLED_SRT


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every TTML2SRT_* variable so settings start from defaults."""
    for name in (
        "TTML2SRT_FORMAT",
        "TTML2SRT_DISABLE_STYLES",
        "TTML2SRT_HOUR_OFFSET",
        "TTML2SRT_OUTPUT_DIR",
        "TTML2SRT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
