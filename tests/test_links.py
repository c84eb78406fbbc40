"""Unit tests for inline link rendering."""
import pytest

from render.links import InlineSegments, LinkSegment, TextSegment, render_links


class TestRenderLinks:
    """Test suite for render_links."""

    def test_no_link_yields_single_plain_segment(self):
        """Text without links comes back unchanged as one segment."""
        segments = list(render_links("Just a plain sentence."))

        assert segments == [TextSegment(text="Just a plain sentence.")]

    def test_empty_line_yields_single_empty_segment(self):
        """An empty line is still one plain segment."""
        assert list(render_links("")) == [TextSegment(text="")]

    def test_one_link_with_surrounding_text(self):
        """pre, link, post — in order."""
        line = "Take a look at [Wealthsimple's TFSA](https://www.wealthsimple.com/en-ca/accounts/tfsa) today."

        segments = list(render_links(line))

        assert segments == [
            TextSegment(text="Take a look at "),
            LinkSegment(label="Wealthsimple's TFSA", url="https://www.wealthsimple.com/en-ca/accounts/tfsa"),
            TextSegment(text=" today."),
        ]

    def test_link_at_line_edges_emits_no_empty_segments(self):
        """A line that is only a link yields just the link."""
        segments = list(render_links("[guide](http://example.com/a)"))

        assert segments == [LinkSegment(label="guide", url="http://example.com/a")]

    def test_multiple_links_keep_order(self):
        """Text between links is preserved."""
        line = "See [A](https://a.example) and [B](https://b.example)!"

        segments = list(render_links(line))

        assert segments == [
            TextSegment(text="See "),
            LinkSegment(label="A", url="https://a.example"),
            TextSegment(text=" and "),
            LinkSegment(label="B", url="https://b.example"),
            TextSegment(text="!"),
        ]

    @pytest.mark.parametrize("line", [
        "Check [this guide](ftp://example.com/file)",
        "Check [this guide](www.example.com)",
        "Unbalanced [bracket(https://example.com)",
        "Missing paren [label](https://example.com",
        "Empty label [](https://example.com)",
    ])
    def test_malformed_syntax_passes_through(self, line):
        """Non-http schemes and broken brackets are never links."""
        assert list(render_links(line)) == [TextSegment(text=line)]

    def test_url_stops_at_first_closing_paren(self):
        """The url does not swallow later parentheses."""
        segments = list(render_links("[calc](https://example.com/tool) (free)"))

        assert segments[0] == LinkSegment(label="calc", url="https://example.com/tool")
        assert segments[1] == TextSegment(text=" (free)")

    def test_sequence_is_restartable(self):
        """Iterating twice gives the same result."""
        segments = render_links("Go [here](https://example.com) now")

        assert list(segments) == list(segments)
        assert isinstance(segments, InlineSegments)

    def test_idempotent_on_plain_outputs(self):
        """Re-rendering a plain segment's text yields that same single segment."""
        line = "a [b](https://x.example) c [d](https://y.example) e"

        for seg in render_links(line):
            if isinstance(seg, TextSegment):
                assert list(render_links(seg.text)) == [seg]
