"""Turn rendering — pure projections of stored turn text."""

from render.formatter import (
    FormattedTurn,
    LineKind,
    RenderedTurn,
    RenderLine,
    classify_line,
    format_turn,
    render_turn,
)
from render.links import InlineSegments, LinkSegment, TextSegment, render_links
from render.quick_replies import QuickReplies, extract_quick_replies

__all__ = [
    "FormattedTurn",
    "InlineSegments",
    "LineKind",
    "LinkSegment",
    "QuickReplies",
    "RenderLine",
    "RenderedTurn",
    "TextSegment",
    "classify_line",
    "extract_quick_replies",
    "format_turn",
    "render_links",
    "render_turn",
]
