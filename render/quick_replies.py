"""Quick-reply extraction — turns an enumerated question into tappable pills.

A reply qualifies only when it carries at least two explicit option lines
(``A)``-``D)``, ``1.`` or ``•``) and every option is concrete: no ``$X`` /
``[...]`` / ``<...>`` placeholders, no bare ``X``, nothing over 60 characters.
Anything else stays prose.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

MAX_OPTION_LENGTH = 60
MIN_OPTIONS = 2

# Priority order: lettered, numbered, bulleted.
# Each entry: (line pattern, inline separator for several options on one line)
OPTION_MARKERS: list[tuple[re.Pattern[str], re.Pattern[str]]] = [
    (re.compile(r"^[A-D]\)\s+(.+)"), re.compile(r"\s{2,}(?=[A-D]\)\s)")),
    (re.compile(r"^\d+\.\s+(.+)"), re.compile(r"\s{2,}(?=\d+\.\s)")),
    (re.compile(r"^•\s+(.+)"), re.compile(r"\s{2,}(?=•\s)")),
]

PLACEHOLDER_RE = re.compile(r"\$X|\[.*?\]|<.*?>|\bX\b")


class QuickReplies(BaseModel):
    """Options found in a reply, plus the reply with those lines removed."""

    model_config = {"frozen": True}

    options: tuple[str, ...]
    remaining_text: str


def _clean_option(body: str) -> str:
    """Drop bold markers and one emphasis pair wrapping the whole body."""
    body = body.replace("**", "").strip()
    if len(body) >= 2 and body[0] == body[-1] and body[0] in "*_" and body[0] not in body[1:-1]:
        body = body[1:-1].strip()
    return body


def parse_option_line(line: str) -> Optional[list[str]]:
    """Return the option bodies carried by one line, or None if it is not an option line."""
    stripped = line.strip()
    for pattern, separator in OPTION_MARKERS:
        if pattern.match(stripped) is None:
            continue
        options = []
        for piece in separator.split(stripped):
            match = pattern.match(piece.strip())
            if match is None:
                continue
            option = _clean_option(match.group(1))
            if option:
                options.append(option)
        return options
    return None


def is_placeholder(option: str) -> bool:
    """True for options that cannot be submitted as-is."""
    return bool(PLACEHOLDER_RE.search(option)) or len(option) > MAX_OPTION_LENGTH


def extract_quick_replies(text: str) -> Optional[QuickReplies]:
    """Find enumerated options in an assistant reply.

    Returns None when the reply has fewer than two options or any option
    looks like a placeholder.
    """
    options: list[str] = []
    for line in text.strip().split("\n"):
        if not line.strip():
            continue
        parsed = parse_option_line(line)
        if parsed:
            options.extend(parsed)

    if len(options) < MIN_OPTIONS:
        return None

    rejected = [o for o in options if is_placeholder(o)]
    if rejected:
        logger.debug("Quick replies rejected, unusable options: %r", rejected)
        return None

    remaining = [line for line in text.split("\n") if parse_option_line(line) is None]
    return QuickReplies(options=tuple(options), remaining_text="\n".join(remaining))
