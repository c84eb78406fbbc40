"""End-of-conversation feedback: when to ask, and what the user picked.

The trigger is a heuristic. It looks for wrap-up phrasing in the latest
assistant turn once the conversation has had a few exchanges; missing a
wrap-up is acceptable, asking twice is not.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from pydantic import BaseModel

from core.turn import Turn

logger = logging.getLogger(__name__)

MIN_ASSISTANT_TURNS = 3

WRAP_UP_SIGNALS = re.compile(
    r"⚠|final call|good luck|hope (this|that) helps|any (other|more) question",
    re.IGNORECASE,
)

# label -> emoji, in display order
FEEDBACK_OPTIONS: dict[str, str] = {
    "Love it": "🤑",
    "Good": "😏",
    "So so": "😐",
}


class FeedbackState(BaseModel):
    """Whether the feedback panel is up, and the user's choice if any."""

    shown: bool = False
    selection: Optional[str] = None

    def select(self, label: str) -> None:
        if label not in FEEDBACK_OPTIONS:
            raise ValueError(f"Unknown feedback option: {label!r}")
        self.selection = label
        logger.info("Feedback selected: %s", label)


def should_show(
    turns: Sequence[Turn],
    already_shown: bool,
    min_assistant_turns: int = MIN_ASSISTANT_TURNS,
) -> bool:
    """Decide whether the conversation looks finished enough to ask for feedback."""
    if already_shown:
        return False

    assistant_turns = [t for t in turns if t.is_assistant]
    if len(assistant_turns) < min_assistant_turns:
        return False

    return WRAP_UP_SIGNALS.search(assistant_turns[-1].text) is not None


class FeedbackTrigger:
    """Fire-once gate around ``should_show``."""

    def __init__(self, min_assistant_turns: int = MIN_ASSISTANT_TURNS):
        self.min_assistant_turns = min_assistant_turns
        self.fired = False

    def evaluate(self, turns: Sequence[Turn]) -> bool:
        """Return True exactly once: the first time the conversation wraps up."""
        if not should_show(turns, self.fired, self.min_assistant_turns):
            return False
        self.fired = True
        logger.debug("Feedback trigger fired after %d turns", len(turns))
        return True
