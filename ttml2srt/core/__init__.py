"""Conversion core: IR, parser, timecodes, styles and cue building.

WHY: The core is the part of the converter that must be exact: timecode
normalization, style inheritance and paragraph order. It is kept free of
I/O, configuration and process state so it can be called from the CLI,
tests or any other host, including several conversions in parallel.

HOW: ir.py defines the data structures, parser.py builds them from XML
text, timecode.py and styles.py are the leaf utilities, cues.py combines
them into numbered cues for the formatters.

RULES:
- No module here reads files, environment variables or settings
- Errors are raised as ConversionError subclasses from errors.py
"""

from ttml2srt.core.cues import build_cues
from ttml2srt.core.errors import ConversionError, InvalidTimecodeError, MalformedInputError
from ttml2srt.core.parser import parse_document
from ttml2srt.core.timecode import normalize_timecode

__all__ = [
    "build_cues",
    "parse_document",
    "normalize_timecode",
    "ConversionError",
    "InvalidTimecodeError",
    "MalformedInputError",
]
