"""Inline markdown link splitting: ``[label](https://...)`` → segments."""

from __future__ import annotations

import re
from typing import Iterator, Union

from pydantic import BaseModel

# Non-nested, non-greedy; the url runs to the first ")".
LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)")


class TextSegment(BaseModel):
    """A run of plain text."""

    model_config = {"frozen": True}

    text: str


class LinkSegment(BaseModel):
    """A ``[label](url)`` reference."""

    model_config = {"frozen": True}

    label: str
    url: str


Segment = Union[TextSegment, LinkSegment]


class InlineSegments:
    """Lazy segment sequence for one line of text.

    Nothing is scanned until iteration starts, and every iteration rescans
    from the beginning, so the same object can be drawn any number of times.
    """

    __slots__ = ("line",)

    def __init__(self, line: str):
        self.line = line

    def __iter__(self) -> Iterator[Segment]:
        line = self.line
        last = 0
        found = False
        for match in LINK_RE.finditer(line):
            found = True
            if match.start() > last:
                yield TextSegment(text=line[last:match.start()])
            yield LinkSegment(label=match.group(1), url=match.group(2))
            last = match.end()
        if not found:
            yield TextSegment(text=line)
        elif last < len(line):
            yield TextSegment(text=line[last:])

    def __repr__(self) -> str:
        return f"InlineSegments({self.line!r})"


def render_links(line: str) -> InlineSegments:
    """Split a line into plain-text and link segments."""
    return InlineSegments(line)
