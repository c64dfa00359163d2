"""Abstract base formatter and output container.

WHY: Every output format consumes the same parsed TimedTextDocument but
produces different file content. This base class enforces a consistent
interface so the CLI and library callers can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements, a ``name`` property
and a ``format()`` method. Render options (style toggle, hour offset
correction, line terminator) are given to the constructor and shared by
all formatters through ``build_cues()``. FormatterOutput is a plain
dataclass that bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list so a formatter may emit several files
- ``suffix`` includes the leading dot, e.g. ``".srt"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from ttml2srt.core.cues import build_cues
from ttml2srt.core.ir import Cue, TimedTextDocument


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``".srt"`` → ``"episode.srt"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"application/x-subrip"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    def __init__(
        self,
        styles_enabled: bool = True,
        hour_offset_correction: bool = True,
        newline: Optional[str] = None,
    ) -> None:
        self.styles_enabled = styles_enabled
        self.hour_offset_correction = hour_offset_correction
        self.newline = os.linesep if newline is None else newline

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip (SRT)'."""

    @abstractmethod
    def format(self, document: TimedTextDocument) -> List[FormatterOutput]:
        """Convert the parsed document into one or more output files.

        Raises:
            InvalidTimecodeError: If a paragraph carries an unreadable timecode.
        """

    def build_cues(self, document: TimedTextDocument) -> List[Cue]:
        """Number and render the document's paragraphs with this formatter's options."""
        return build_cues(
            document.paragraphs,
            document.styles,
            styles_enabled=self.styles_enabled,
            hour_offset_correction=self.hour_offset_correction,
        )
