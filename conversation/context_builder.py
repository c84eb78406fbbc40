"""ContextBuilder — maps the conversation onto Claude API message format."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from conversation.prompts import SYSTEM_PROMPT

if TYPE_CHECKING:
    from core.turn import Turn


def build_system_prompt() -> str:
    """The fixed behavioral preamble sent with every call."""
    return SYSTEM_PROMPT


def build_messages(turns: Sequence[Turn]) -> list[dict[str, str]]:
    """Convert the full turn history into Claude API messages, oldest first."""
    return [turn.to_message() for turn in turns]
