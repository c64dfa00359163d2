"""JSON cue list formatter.

WHY: Scripts and web tooling that post-process subtitles prefer a
structured cue list over re-parsing SRT text. The JSON output carries
exactly what the SRT output carries, in machine-readable form.

HOW: Builds cues with the formatter's options and dumps them as a JSON
object with the document language and a "cues" array. The shape is
described by cues_schema.json next to this module.

RULES:
- Cue fields: index, begin, end, lines (same values as the SRT output)
- "language" is the document's xml:lang or null
- Output suffix: ".json"; media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ttml2srt.core.ir import TimedTextDocument
from ttml2srt.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "cues_schema.json"


def load_schema() -> Dict[str, Any]:
    """Load the JSON Schema describing this formatter's output."""
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


class JSONCuesFormatter(BaseFormatter):
    """Formatter that produces a JSON cue list."""

    @property
    def name(self) -> str:
        return "JSON cues"

    def format(self, document: TimedTextDocument) -> List[FormatterOutput]:
        cues = self.build_cues(document)
        output = {
            "language": document.language,
            "cues": [
                {
                    "index": cue.index,
                    "begin": cue.begin,
                    "end": cue.end,
                    "lines": list(cue.lines),
                }
                for cue in cues
            ],
        }
        content = json.dumps(output, indent=2, ensure_ascii=False)

        return [
            FormatterOutput(
                suffix=".json",
                content=content,
                media_type="application/json",
            )
        ]
