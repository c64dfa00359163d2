"""Plain text formatter: subtitle text only, no numbers or timecodes.

WHY: Editors and translators often want just the dialogue of a subtitle
file for review or word counts. This is the simplest output and shares
the same cue building as SRT, so the text is identical minus markup.

HOW: Builds cues with style rendering forced off, then writes the lines
of each cue as one paragraph. Paragraphs are separated by a blank line.

RULES:
- Never emits <font> markup, whatever the styles_enabled option says
- Cues without text are left out
- Output suffix: ".txt"; media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from ttml2srt.core.cues import build_cues
from ttml2srt.core.ir import TimedTextDocument
from ttml2srt.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces the subtitle dialogue as plain text."""

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, document: TimedTextDocument) -> List[FormatterOutput]:
        cues = build_cues(
            document.paragraphs,
            document.styles,
            styles_enabled=False,
            hour_offset_correction=self.hour_offset_correction,
        )
        paragraphs = [self.newline.join(cue.lines) for cue in cues if cue.lines]
        content = (self.newline * 2).join(paragraphs)
        if content:
            content += self.newline

        return [
            FormatterOutput(
                suffix=".txt",
                content=content,
                media_type="text/plain",
            )
        ]
