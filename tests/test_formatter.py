"""Unit tests for turn formatting."""
from core.turn import Speaker, Turn
from render.formatter import LineKind, classify_line, format_turn, render_turn
from render.links import LinkSegment, TextSegment


class TestClassifyLine:
    """Test suite for the line classifier."""

    def test_warning_with_variation_selector(self):
        assert classify_line("⚠️ The final call is yours.") == (
            LineKind.WARNING, "⚠️ The final call is yours."
        )

    def test_warning_without_variation_selector(self):
        kind, _ = classify_line("⚠ Heads up")
        assert kind is LineKind.WARNING

    def test_dash_bullet(self):
        assert classify_line("- Max your TFSA") == (LineKind.BULLET, "Max your TFSA")

    def test_star_bullet(self):
        assert classify_line("* Then the RRSP") == (LineKind.BULLET, "Then the RRSP")

    def test_blank(self):
        assert classify_line("   ") == (LineKind.BLANK, "")

    def test_paragraph_fallback(self):
        assert classify_line("Short answer: TFSA.") == (LineKind.PARAGRAPH, "Short answer: TFSA.")

    def test_indented_dash_is_paragraph(self):
        """Bullet prefixes are matched at the very start of the line."""
        kind, _ = classify_line("  - nested")
        assert kind is LineKind.PARAGRAPH

    def test_dash_without_space_is_paragraph(self):
        kind, _ = classify_line("-5% this year")
        assert kind is LineKind.PARAGRAPH


class TestFormatTurn:
    """Test suite for format_turn."""

    def test_mixed_reply(self):
        """Each line gets its kind, in order."""
        text = "Here's the deal 💸\n\n- TFSA first\n* RRSP second\n⚠️ The final call is yours."

        formatted = format_turn(text, is_assistant=True)

        kinds = [line.kind for line in formatted.lines]
        assert kinds == [
            LineKind.PARAGRAPH,
            LineKind.BLANK,
            LineKind.BULLET,
            LineKind.BULLET,
            LineKind.WARNING,
        ]
        assert formatted.ends_with_question is False

    def test_assistant_question_paragraph_is_emphasized(self):
        formatted = format_turn("Nice.\nWhat province are you in?", is_assistant=True)

        assert formatted.lines[0].emphasized is False
        assert formatted.lines[1].emphasized is True
        assert formatted.ends_with_question is True

    def test_question_mid_reply_emphasized_but_not_final(self):
        """Emphasis is independent of the final-line flag."""
        formatted = format_turn("Why TFSA? Flexibility.\nThat's it.", is_assistant=True)

        assert formatted.lines[0].emphasized is True
        assert formatted.ends_with_question is False

    def test_trailing_blank_lines_ignored_for_question(self):
        formatted = format_turn("Are you renting?  \n\n", is_assistant=True)

        assert formatted.ends_with_question is True

    def test_user_turn_never_emphasized(self):
        formatted = format_turn("Should I buy gold?", is_assistant=False)

        assert formatted.lines[0].emphasized is False
        assert formatted.ends_with_question is False

    def test_bullets_are_not_emphasized(self):
        formatted = format_turn("- Is it worth it?", is_assistant=True)

        assert formatted.lines[0].emphasized is False

    def test_empty_text(self):
        """Total: even an empty turn formats."""
        formatted = format_turn("", is_assistant=True)

        assert [line.kind for line in formatted.lines] == [LineKind.BLANK]
        assert formatted.ends_with_question is False

    def test_links_rendered_per_line(self):
        formatted = format_turn(
            "- Check [this RRSP guide](https://example.com/rrsp) out", is_assistant=True
        )

        assert list(formatted.lines[0].segments) == [
            TextSegment(text="Check "),
            LinkSegment(label="this RRSP guide", url="https://example.com/rrsp"),
            TextSegment(text=" out"),
        ]


class TestRenderTurn:
    """Test suite for render_turn."""

    def test_assistant_turn_with_options(self):
        """Option lines become pills and are dropped from the body."""
        turn = Turn(
            speaker=Speaker.ASSISTANT,
            text="Which account are you leaning towards?\n1. TFSA\n2. RRSP\n3. Not sure yet",
        )

        rendered = render_turn(turn)

        assert rendered.quick_replies == ("TFSA", "RRSP", "Not sure yet")
        assert [line.text for line in rendered.lines] == ["Which account are you leaning towards?"]
        assert rendered.lines[0].emphasized is True
        assert rendered.ends_with_question is True

    def test_assistant_turn_without_options(self):
        turn = Turn(speaker=Speaker.ASSISTANT, text="Where do you live?")

        rendered = render_turn(turn)

        assert rendered.quick_replies is None
        assert rendered.ends_with_question is True

    def test_rejected_options_stay_in_body(self):
        """Placeholder options render as prose."""
        turn = Turn(speaker=Speaker.ASSISTANT, text="Options:\n1. Save $X\n2. Invest $X")

        rendered = render_turn(turn)

        assert rendered.quick_replies is None
        assert len(rendered.lines) == 3

    def test_user_turn_never_gets_pills(self):
        turn = Turn(speaker=Speaker.USER, text="1. TFSA\n2. RRSP")

        rendered = render_turn(turn)

        assert rendered.quick_replies is None
        assert rendered.speaker is Speaker.USER
        assert len(rendered.lines) == 2
