"""Intermediate representation dataclasses for parsed timed-text documents.

WHY: TTML is a deeply nested XML tree with namespaces, referential styles
and mixed content. Downstream code (cue building, SRT/text/JSON output)
only needs timed paragraphs, their inline spans and a flat style table.
The IR is the value output of the parser, with no references back into
the XML tree, so the tree can be discarded right after parsing.

HOW: Six dataclasses form a hierarchy:
  StyleDefinition    one named <style> with its attributes
  Span               one run of inline text with an optional style id
  Paragraph          one <p>: raw begin/end timecodes, style id, spans
  TimedTextDocument  ordered paragraphs plus the style table
  ResolvedStyle      merged paragraph + span attributes for one span
  Cue                one numbered output unit, built during rendering

RULES:
- Paragraph order is cue order; numbering starts at 1 with no gaps
- Timecodes stay raw in the IR; normalization happens at render time
- Attribute names are namespace-stripped local names ("color", "fontStyle")
- A span whose text is empty or whitespace-only is layout-only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

COLOR_ATTRIBUTE = "color"


@dataclass
class StyleDefinition:
    """A named style from the document head.

    RULES:
    - style_id: value of the xml:id attribute, unique within a document
    - attributes: local attribute name → string value, already merged with
      any styles this one references
    """

    style_id: str
    attributes: Dict[str, str] = field(default_factory=dict)


StyleTable = Dict[str, StyleDefinition]
"""Style id → StyleDefinition lookup for one document."""


@dataclass
class Span:
    """A unit of inline text inside a paragraph.

    RULES:
    - text: stripped text content; embedded "\\n" marks a <br/> line break
    - style_id: the span's own style reference, or None for bare text
    """

    text: str
    style_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True if the span carries no visible text."""
        return not self.text.strip()


@dataclass
class Paragraph:
    """One timed paragraph (<p>) of the document.

    RULES:
    - begin / end: raw timecode tokens exactly as found in the document;
      end is "" when the paragraph only carries a duration
    - style_id: paragraph-level style reference, base for every span
    - spans: always a list, possibly empty
    - duration: raw "dur" token, used only when end is absent
    """

    begin: str
    end: str
    style_id: Optional[str] = None
    spans: List[Span] = field(default_factory=list)
    duration: Optional[str] = None


@dataclass
class TimedTextDocument:
    """The parsed document handed from the parser to the formatters."""

    paragraphs: List[Paragraph] = field(default_factory=list)
    styles: StyleTable = field(default_factory=dict)
    language: Optional[str] = None


@dataclass
class ResolvedStyle:
    """Flat render attributes for one span after merging.

    WHY: Renderers must ask for a specific attribute instead of probing a
    dict for arbitrary keys. get() and the color property are the only
    lookups renderers use.
    """

    attributes: Dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    @property
    def color(self) -> Optional[str]:
        return self.attributes.get(COLOR_ATTRIBUTE)


@dataclass
class Cue:
    """One subtitle display unit.

    RULES:
    - index: 1-based sequence number
    - begin / end: canonical HH:mm:ss.mmm timecodes
    - lines: rendered text lines (may be empty; may carry <font> markup)
    """

    index: int
    begin: str
    end: str
    lines: List[str] = field(default_factory=list)
