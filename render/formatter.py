"""TurnFormatter — classifies each physical line of a turn for display.

Everything here is a pure projection of ``Turn.text``: the UI calls
``render_turn`` on every draw and nothing derived is stored.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from core.turn import Speaker, Turn
from render.links import InlineSegments, render_links
from render.quick_replies import extract_quick_replies

# Matches both "⚠" and the emoji presentation "⚠️"
WARNING_GLYPH = "⚠"
BULLET_PREFIXES = ("- ", "* ")


class LineKind(str, Enum):
    PARAGRAPH = "paragraph"
    BULLET = "bullet"
    WARNING = "warning"
    BLANK = "blank"


class RenderLine(BaseModel):
    """One classified line; ``text`` is the content left after the prefix is stripped."""

    model_config = {"frozen": True}

    kind: LineKind
    text: str
    emphasized: bool = False

    @property
    def segments(self) -> InlineSegments:
        return render_links(self.text)


class FormattedTurn(BaseModel):
    model_config = {"frozen": True}

    lines: tuple[RenderLine, ...]
    ends_with_question: bool = False


class RenderedTurn(BaseModel):
    """Everything the UI needs to draw one turn."""

    model_config = {"frozen": True}

    speaker: Speaker
    lines: tuple[RenderLine, ...]
    quick_replies: Optional[tuple[str, ...]] = None
    ends_with_question: bool = False


def classify_line(line: str) -> tuple[LineKind, str]:
    """Tag a line with its kind and the content to render."""
    if line.startswith(WARNING_GLYPH):
        return LineKind.WARNING, line
    if line.startswith(BULLET_PREFIXES):
        return LineKind.BULLET, line[2:]
    if not line.strip():
        return LineKind.BLANK, ""
    return LineKind.PARAGRAPH, line


def format_turn(text: str, is_assistant: bool) -> FormattedTurn:
    """Split ``text`` into render lines.

    Assistant paragraphs containing ``?`` are emphasized, and
    ``ends_with_question`` reports whether the last non-blank line of an
    assistant turn is a bare follow-up question.
    """
    lines = []
    for raw in text.split("\n"):
        kind, content = classify_line(raw)
        emphasized = is_assistant and kind is LineKind.PARAGRAPH and "?" in content
        lines.append(RenderLine(kind=kind, text=content, emphasized=emphasized))

    non_blank = [raw for raw in text.split("\n") if raw.strip()]
    last_line = non_blank[-1].strip() if non_blank else ""
    ends_with_question = is_assistant and last_line.endswith("?")

    return FormattedTurn(lines=tuple(lines), ends_with_question=ends_with_question)


def render_turn(turn: Turn) -> RenderedTurn:
    """Extract quick replies (assistant only) and format what remains."""
    quick = extract_quick_replies(turn.text) if turn.is_assistant else None
    text = quick.remaining_text if quick is not None else turn.text
    formatted = format_turn(text, turn.is_assistant)
    return RenderedTurn(
        speaker=turn.speaker,
        lines=formatted.lines,
        quick_replies=quick.options if quick is not None else None,
        ends_with_question=formatted.ends_with_question,
    )
