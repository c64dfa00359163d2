"""SubRip (SRT) formatter.

WHY: SRT is the target format of the converter and the one players are
strict about: cue numbers, the timecode line and the blank-line separator
must be byte exact.

HOW: render_srt() builds cues from the paragraph list and serializes
them; SRTFormatter wraps it for the formatter registry.

RULES:
- Cue block: index, "<begin> --> <end>", text lines, each followed by
  the line terminator
- Exactly one blank line between cue blocks
- A cue without text keeps its index and timecode line
- Registered as "srt" in the FORMATTERS dict; suffix ".srt"
"""

from __future__ import annotations

import os
from typing import List, Optional

from ttml2srt.core.cues import build_cues
from ttml2srt.core.ir import Cue, Paragraph, StyleTable, TimedTextDocument
from ttml2srt.formatters.base import BaseFormatter, FormatterOutput

SRT_ARROW = " --> "


def serialize_cues(cues: List[Cue], newline: str = os.linesep) -> str:
    """Serialize numbered cues into SRT text."""
    blocks = []
    for cue in cues:
        lines = [str(cue.index), cue.begin + SRT_ARROW + cue.end]
        lines.extend(cue.lines)
        blocks.append(newline.join(lines) + newline)
    return newline.join(blocks)


def render_srt(
    paragraphs: List[Paragraph],
    styles: StyleTable,
    styles_enabled: bool = True,
    hour_offset_correction: bool = True,
    newline: Optional[str] = None,
) -> str:
    """Render a paragraph list as a complete SRT document.

    Args:
        paragraphs: Parsed paragraphs in document order.
        styles: Style table of the same document.
        styles_enabled: Emit <font color> markup for styled spans.
        hour_offset_correction: Apply the 10/20-hour timecode heuristic.
        newline: Line terminator (default: the platform's).

    Returns:
        SRT text; an empty string when there are no paragraphs.

    Raises:
        InvalidTimecodeError: If a begin/end token cannot be parsed.
    """
    cues = build_cues(
        paragraphs,
        styles,
        styles_enabled=styles_enabled,
        hour_offset_correction=hour_offset_correction,
    )
    return serialize_cues(cues, os.linesep if newline is None else newline)


class SRTFormatter(BaseFormatter):
    """Formatter that produces one SubRip file."""

    @property
    def name(self) -> str:
        return "SubRip (SRT)"

    def format(self, document: TimedTextDocument) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".srt",
                content=serialize_cues(self.build_cues(document), self.newline),
                media_type="application/x-subrip",
            )
        ]
