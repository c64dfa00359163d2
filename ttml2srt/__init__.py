"""ttml2srt: convert TTML / EBU-TT subtitles to SubRip (SRT).

WHY: Broadcasters deliver subtitles as TTML or EBU-TT XML, while most
players and editing tools only read SRT. This package parses the XML into
a small intermediate representation (IR), normalizes the many timecode
encodings, resolves style inheritance and serializes SRT (or plain text
or a JSON cue list).

HOW: Three-stage pipeline: parse (core.parser), build cues (core.cues,
using core.timecode and core.styles), format (pluggable formatters).
Each stage is independently testable. ``convert()`` runs all three for
the SRT case.

RULES:
- The core is pure: no I/O, no settings, no process-wide state
- All formatters consume the same TimedTextDocument IR
- Adding a new output format = one new formatter module, no core changes
"""

from ttml2srt.converter import convert
from ttml2srt.core.errors import ConversionError, InvalidTimecodeError, MalformedInputError

__version__ = "0.1.0"

__all__ = [
    "convert",
    "ConversionError",
    "InvalidTimecodeError",
    "MalformedInputError",
    "__version__",
]
