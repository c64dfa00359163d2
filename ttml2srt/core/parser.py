"""Parse TTML / EBU-TT XML text into a TimedTextDocument.

WHY: Everything downstream works on timed paragraphs and a style table,
not on XML. Parsing happens once, here; the tree is dropped afterwards
so no component ever re-enters it.

HOW: ElementTree parses the text. Elements and attributes are matched by
local name, so prefixed EBU-TT ("tt:p", "tts:color", "xml:id") and
default-namespace TTML are read the same way. The head's styling section
becomes a StyleTable; every <p> under <body> becomes a Paragraph whose
mixed content is normalized into a list of Spans.

RULES:
- Not well-formed XML, a root that is not <tt>, a missing <body> or a body
  without any <div> raise MalformedInputError
- A missing <head> or <styling> yields an empty style table
- Paragraph order is document order, across all divs
- Inline content is always a list of Spans: bare text runs become
  unstyled spans, <span> elements keep their style id
- <br/> inside a span becomes "\\n"; whitespace is collapsed per line
- An unstyled nested span is part of its enclosing span's text; a styled
  nested span becomes a span of its own whose style reference lists the
  enclosing ids followed by its own ("outer inner"), so it wins on render
- Styling comes from style id references only; inline tts:* attributes
  on <p> or <span> are not read
- Text is passed through as decoded by the XML parser: "&lt;i&gt;" in the
  source becomes a literal "<i>" in the cue text, which SRT players treat
  as markup
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union
from xml.etree import ElementTree as ET

from ttml2srt.core.errors import MalformedInputError
from ttml2srt.core.ir import Paragraph, Span, TimedTextDocument
from ttml2srt.core.styles import RawStyle, build_style_table

logger = logging.getLogger(__name__)

_BREAK = object()
"""Sentinel recorded for <br/> while walking inline content."""

InlineToken = Union[str, object]


def local_name(name: str) -> str:
    """Strip the "{namespace}" prefix ElementTree puts on tags/attributes."""
    return name.split("}", 1)[-1]


def _attributes(element: ET.Element) -> Dict[str, str]:
    return {local_name(key): value for key, value in element.attrib.items()}


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if local_name(child.tag) == name]


def _join_inline(tokens: List[InlineToken]) -> str:
    lines = [""]
    for token in tokens:
        if token is _BREAK:
            lines.append("")
        else:
            lines[-1] += token  # type: ignore[operator]
    collapsed = (" ".join(line.split()) for line in lines)
    return "\n".join(line for line in collapsed if line)


def _flush(pending: List[InlineToken], style_ref: Optional[str], spans: List[Span]) -> None:
    if pending:
        spans.append(Span(text=_join_inline(pending), style_id=style_ref))
        pending.clear()


def _nested_ref(outer: Optional[str], own: str) -> str:
    """Enclosing references first, so the inner span's own style wins."""
    return "{} {}".format(outer, own) if outer else own


def _collect_inline(
    element: ET.Element,
    style_ref: Optional[str],
    pending: List[InlineToken],
    spans: List[Span],
) -> None:
    """Walk a span's content into ``pending``, splitting off styled children.

    An unstyled nested span stays part of the current text run. A styled
    one closes the run and is collected as a span of its own.
    """
    if element.text:
        pending.append(element.text)
    for child in element:
        name = local_name(child.tag)
        if name == "br":
            pending.append(_BREAK)
        elif name == "span":
            own = _attributes(child).get("style")
            if own:
                _flush(pending, style_ref, spans)
                inner_ref = _nested_ref(style_ref, own)
                inner: List[InlineToken] = []
                _collect_inline(child, inner_ref, inner, spans)
                _flush(inner, inner_ref, spans)
            else:
                _collect_inline(child, style_ref, pending, spans)
        if child.tail:
            pending.append(child.tail)


def _parse_spans(paragraph: ET.Element) -> List[Span]:
    """Normalize a paragraph's mixed content into an ordered span list."""
    spans: List[Span] = []
    pending: List[InlineToken] = []

    if paragraph.text:
        pending.append(paragraph.text)
    for child in paragraph:
        name = local_name(child.tag)
        if name == "span":
            _flush(pending, None, spans)
            style_ref = _attributes(child).get("style")
            inner: List[InlineToken] = []
            produced = len(spans)
            _collect_inline(child, style_ref, inner, spans)
            # An empty <span/> still yields one (empty) span
            if inner or len(spans) == produced:
                spans.append(Span(text=_join_inline(inner), style_id=style_ref))
        elif name == "br" and pending:
            pending.append(_BREAK)
        if child.tail:
            pending.append(child.tail)
    _flush(pending, None, spans)
    return spans


def _parse_paragraph(element: ET.Element) -> Paragraph:
    attrs = _attributes(element)
    return Paragraph(
        begin=attrs.get("begin", ""),
        end=attrs.get("end", ""),
        style_id=attrs.get("style"),
        spans=_parse_spans(element),
        duration=attrs.get("dur"),
    )


def _parse_styles(root: ET.Element) -> Dict[str, RawStyle]:
    raw: Dict[str, RawStyle] = {}
    for head in _children(root, "head"):
        for styling in _children(head, "styling"):
            for style in _children(styling, "style"):
                attrs = _attributes(style)
                style_id = attrs.pop("id", None)
                if not style_id:
                    continue
                refs = attrs.pop("style", "").split()
                raw[style_id] = (attrs, refs)
    return raw


def parse_document(raw_text: str) -> TimedTextDocument:
    """Parse TTML text into paragraphs and a style table.

    Args:
        raw_text: Complete XML document text.

    Returns:
        TimedTextDocument with paragraphs in document order.

    Raises:
        MalformedInputError: If the XML is not well-formed or lacks the
            tt/body/div structure.
    """
    try:
        root = ET.fromstring(raw_text.lstrip("\ufeff"))
    except ET.ParseError as e:
        raise MalformedInputError("Malformed XML: {}".format(e)) from e

    if local_name(root.tag) != "tt":
        raise MalformedInputError("Root element is <{}>, expected <tt>".format(local_name(root.tag)))

    bodies = _children(root, "body")
    if not bodies:
        raise MalformedInputError("Document has no <body> element")
    body = bodies[0]
    if not any(local_name(el.tag) == "div" for el in body.iter()):
        raise MalformedInputError("Document body has no <div> paragraph container")

    styles = build_style_table(_parse_styles(root))
    paragraphs = [
        _parse_paragraph(el) for el in body.iter() if local_name(el.tag) == "p"
    ]
    language: Optional[str] = _attributes(root).get("lang")

    logger.debug("Parsed %d paragraphs and %d styles", len(paragraphs), len(styles))
    return TimedTextDocument(paragraphs=paragraphs, styles=styles, language=language)
