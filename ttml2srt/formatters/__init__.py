"""Output formatter registry: pluggable format hub.

WHY: The CLI and the converter entry point need a single lookup to find
the right formatter by name (the ``--format`` option). A central dict
makes it trivial to add new formats: create the formatter class, import
it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate with their render options:
``formatter = FORMATTERS["srt"](styles_enabled=False)``.

RULES:
- Keys are short lowercase identifiers (used in CLI flags and config)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from ttml2srt.formatters.json_cues import JSONCuesFormatter
from ttml2srt.formatters.plain_text import PlainTextFormatter
from ttml2srt.formatters.srt_subtitles import SRTFormatter

if TYPE_CHECKING:
    from ttml2srt.formatters.base import BaseFormatter

DEFAULT_FORMAT = "srt"

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "srt": SRTFormatter,
    "text": PlainTextFormatter,
    "json": JSONCuesFormatter,
}
