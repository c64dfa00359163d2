"""Build numbered cues from parsed paragraphs.

WHY: Every output format needs the same thing from a paragraph list:
sequence numbers, canonical begin/end times and styled text lines. Doing
it once here keeps the formatters down to pure serialization.

HOW: build_cues() walks the paragraphs in order. For each one it
normalizes begin/end through the timecode module and renders every
non-empty span, line by line, with the paragraph style as base and the
span style as override.

RULES:
- Cue indices run 1..N in paragraph order with no gaps
- Empty spans produce no line; a paragraph without text still yields a cue
- With styles disabled every span renders with an empty ResolvedStyle
- A paragraph without "end" uses begin + "dur" when a duration is present
"""

from __future__ import annotations

import logging
from typing import List

from ttml2srt.core.errors import InvalidTimecodeError
from ttml2srt.core.ir import Cue, Paragraph, ResolvedStyle, StyleTable
from ttml2srt.core.styles import render_line_with_style, resolve_style
from ttml2srt.core.timecode import format_timecode, parse_timecode

logger = logging.getLogger(__name__)


def _paragraph_times(paragraph: Paragraph, hour_offset_correction: bool):
    begin_ms = parse_timecode(paragraph.begin, hour_offset_correction)
    if paragraph.end:
        end_ms = parse_timecode(paragraph.end, hour_offset_correction)
    elif paragraph.duration:
        end_ms = begin_ms + parse_timecode(paragraph.duration, hour_offset_correction=False)
    else:
        raise InvalidTimecodeError(paragraph.end)
    return format_timecode(begin_ms), format_timecode(end_ms)


def render_paragraph_lines(
    paragraph: Paragraph,
    styles: StyleTable,
    styles_enabled: bool = True,
) -> List[str]:
    """Render the text lines of one paragraph."""
    lines: List[str] = []
    for span in paragraph.spans:
        if span.is_empty:
            continue
        if styles_enabled:
            style = resolve_style(styles, paragraph.style_id, span.style_id)
        else:
            style = ResolvedStyle()
        for line in span.text.split("\n"):
            lines.append(render_line_with_style(line, style))
    return lines


def build_cues(
    paragraphs: List[Paragraph],
    styles: StyleTable,
    styles_enabled: bool = True,
    hour_offset_correction: bool = True,
) -> List[Cue]:
    """Turn a paragraph list into numbered cues.

    Raises:
        InvalidTimecodeError: If a begin/end token cannot be parsed.
    """
    cues: List[Cue] = []
    for index, paragraph in enumerate(paragraphs, 1):
        begin, end = _paragraph_times(paragraph, hour_offset_correction)
        lines = render_paragraph_lines(paragraph, styles, styles_enabled)
        if not lines:
            logger.debug("Cue %d has no text", index)
        cues.append(Cue(index=index, begin=begin, end=end, lines=lines))
    return cues
