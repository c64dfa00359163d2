"""Style table construction, style resolution and inline colour markup.

WHY: TTML styles are declared once in the document head and referenced by
id from paragraphs and spans. SRT has no style sheets, so every span needs
its final attributes computed (paragraph style overlaid by span style) and
turned into inline <font> markup.

HOW: build_style_table() flattens referential styles (a <style> that
references other styles through its own "style" attribute) into plain
StyleDefinitions. resolve_style() merges a base and an override style.
render_line_with_style() wraps text in a <font color> tag when the
resolved colour expresses an explicit intent.

RULES:
- Unknown or missing style ids contribute nothing; they are never errors
- Override (span) attributes win over base (paragraph) attributes
- Pure black and pure white are treated as "no colour intent" and emit
  no markup, so player defaults are not overridden
- Colour values are emitted lower-cased
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ttml2srt.core.ir import ResolvedStyle, StyleDefinition, StyleTable

logger = logging.getLogger(__name__)

# Colours that carry no explicit intent (opaque black/white in every
# notation EBU-TT producers use).
NEUTRAL_COLORS = frozenset({
    "#000000",
    "#ffffff",
    "#000000ff",
    "#ffffffff",
    "black",
    "white",
})

RawStyle = Tuple[Dict[str, str], Sequence[str]]
"""Own attributes plus ids of referenced styles, as read from the XML."""


def build_style_table(raw_styles: Mapping[str, RawStyle]) -> StyleTable:
    """Resolve referential styling into a flat style table.

    HOW: Depth-first over the references. Referenced styles are applied in
    order, then the style's own attributes on top. A reference cycle is cut
    at the point it is detected.

    Args:
        raw_styles: style id → (own attributes, referenced style ids).

    Returns:
        Style id → StyleDefinition with fully merged attributes.
    """
    resolved: StyleTable = {}

    def resolve(style_id: str, stack: List[str]) -> Dict[str, str]:
        if style_id in resolved:
            return resolved[style_id].attributes
        own, refs = raw_styles[style_id]
        if style_id in stack:
            logger.debug("Style reference cycle at %s", style_id)
            return dict(own)
        stack.append(style_id)
        merged: Dict[str, str] = {}
        for ref in refs:
            if ref in raw_styles:
                merged.update(resolve(ref, stack))
            else:
                logger.debug("Style %s references unknown style %s", style_id, ref)
        merged.update(own)
        stack.pop()
        resolved[style_id] = StyleDefinition(style_id=style_id, attributes=merged)
        return merged

    for style_id in raw_styles:
        resolve(style_id, [])
    return resolved


def _lookup(styles: StyleTable, style_ref: Optional[str]) -> Dict[str, str]:
    """Attributes for a style reference; "a b" applies a then b."""
    attributes: Dict[str, str] = {}
    for style_id in (style_ref or "").split():
        style = styles.get(style_id)
        if style is None:
            logger.debug("Unknown style reference %r treated as no style", style_id)
            continue
        attributes.update(style.attributes)
    return attributes


def resolve_style(
    styles: StyleTable,
    base_style_id: Optional[str] = None,
    override_style_id: Optional[str] = None,
) -> ResolvedStyle:
    """Merge base (paragraph) and override (span) styles.

    >>> table = {
    ...     "red": StyleDefinition("red", {"color": "red"}),
    ...     "blue": StyleDefinition("blue", {"color": "blue"}),
    ... }
    >>> resolve_style(table, "red", "blue").color
    'blue'
    """
    attributes = dict(_lookup(styles, base_style_id))
    attributes.update(_lookup(styles, override_style_id))
    return ResolvedStyle(attributes=attributes)


def is_neutral_color(color: str) -> bool:
    """True for pure black or pure white, case-insensitive."""
    return color.strip().lower() in NEUTRAL_COLORS


def render_line_with_style(text: str, style: ResolvedStyle) -> str:
    """Apply inline colour markup to one line of text."""
    color = style.color
    if not color or is_neutral_color(color):
        return text
    return '<font color="{}">{}</font>'.format(color.strip().lower(), text)
