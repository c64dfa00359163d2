"""Single entry point for TTML → SRT conversion.

WHY: Library callers want one function: document text in, SRT text out.
The CLI composes the same steps itself so it can pick other formatters.

HOW: parse_document() → render_srt(). Both steps are pure, so the whole
conversion either returns a complete string or raises.

RULES:
- Raises MalformedInputError or InvalidTimecodeError, never returns
  partial output
- No file I/O, no environment or settings access
- Thread-safe: every call owns its document and style table
"""

from __future__ import annotations

from typing import Optional

from ttml2srt.core.parser import parse_document
from ttml2srt.formatters.srt_subtitles import render_srt


def convert(
    xml_text: str,
    styles_enabled: bool = True,
    *,
    hour_offset_correction: bool = True,
    newline: Optional[str] = None,
) -> str:
    """Convert a TTML / EBU-TT document to SRT.

    Args:
        xml_text: Complete TTML document text.
        styles_enabled: Emit <font color> markup for coloured spans.
        hour_offset_correction: Strip 10/20-hour EBU-TT segment offsets
            from clock-style timecodes.
        newline: Line terminator (default: the platform's).

    Returns:
        The SRT document as one string.

    Raises:
        MalformedInputError: The XML is not well-formed or lacks body/div.
        InvalidTimecodeError: A begin/end token has an unsupported encoding.
    """
    document = parse_document(xml_text)
    return render_srt(
        document.paragraphs,
        document.styles,
        styles_enabled=styles_enabled,
        hour_offset_correction=hour_offset_correction,
        newline=newline,
    )
