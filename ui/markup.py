"""Rich text for rendered turns, shared by the TUI and the CLI."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from conversation.prompts import ASSISTANT_NAME, USER_LABEL
from core.turn import Speaker
from render.formatter import LineKind, RenderedTurn, RenderLine
from render.links import LinkSegment

LINK_COLOR = "#00C805"
WARNING_STYLE = Style(color="black", bgcolor="#E8F9E8", bold=True)


def speaker_label(speaker: Speaker) -> str:
    return USER_LABEL if speaker is Speaker.USER else ASSISTANT_NAME


def line_to_text(line: RenderLine) -> Text:
    """Build one display line; links become clickable underlined spans."""
    text = Text()
    if line.kind is LineKind.BLANK:
        return text
    if line.kind is LineKind.BULLET:
        text.append("  • ")

    base = Style(bold=line.emphasized)
    for seg in line.segments:
        if isinstance(seg, LinkSegment):
            text.append(seg.label, base + Style(color=LINK_COLOR, underline=True, link=seg.url))
        else:
            text.append(seg.text, base)

    if line.kind is LineKind.WARNING:
        text.stylize(WARNING_STYLE)
        text.pad_left(1)
        text.pad_right(1)
    return text


def turn_to_text(rendered: RenderedTurn) -> Text:
    """Label plus body lines, without the quick-reply pills."""
    label_style = "bold cyan" if rendered.speaker is Speaker.USER else "bold green"
    out = Text(speaker_label(rendered.speaker).upper(), style=label_style)
    for line in rendered.lines:
        out.append("\n")
        out.append_text(line_to_text(line))
    return out


def pending_user_text(text: str) -> Text:
    """User message shown before its turn is stored; the text is never parsed as markup."""
    return Text.assemble((USER_LABEL.upper(), "bold cyan"), "\n", text)


def system_text(content: str) -> Text:
    return Text(content, style="dim italic")
