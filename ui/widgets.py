"""Reusable Textual widgets for the MoneyBuddy TUI."""

from __future__ import annotations

from typing import Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Label, RichLog, Static

from conversation.feedback import FEEDBACK_OPTIONS
from conversation.prompts import FEEDBACK_THANKS, FEEDBACK_TITLE, QUICK_REPLY_HINT, StarterPrompt
from render.formatter import RenderedTurn
from ui.markup import system_text, turn_to_text


class ConversationView(RichLog):
    """Chat transcript, redrawn from the stored turns on every change."""

    def show_turns(self, rendered: Sequence[RenderedTurn]) -> None:
        self.clear()
        for turn in rendered:
            self.write(turn_to_text(turn))
            self.write("")

    def add_system_message(self, content: str) -> None:
        self.write(system_text(content))


class StarterPanel(Vertical):
    """Canned openers shown until the first message is sent."""

    class Selected(Message):
        def __init__(self, text: str) -> None:
            self.text = text
            super().__init__()

    def __init__(self, starters: Sequence[StarterPrompt], **kwargs):
        super().__init__(**kwargs)
        self._starters = list(starters)

    def compose(self) -> ComposeResult:
        yield Static("[bold]Your money coach.[/] [italic]No jargon. No judgment. 💸[/]")
        yield Static(
            "[dim]No forms. No dropdowns. Just tell us where you're at — "
            "messy, incomplete, uncertain, whatever.[/]"
        )
        yield Static("[dim]Try one of these →[/]")
        for i, starter in enumerate(self._starters):
            yield Button(f"{starter.emoji}  {starter.text}", name=str(i), classes="starter")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        starter = self._starters[int(event.button.name or 0)]
        self.post_message(self.Selected(starter.text))


class QuickReplyBar(Vertical):
    """Pill buttons for the newest assistant turn."""

    class Selected(Message):
        def __init__(self, label: str) -> None:
            self.label = label
            super().__init__()

    def set_options(self, options: Sequence[str] | None) -> None:
        self.remove_children()
        if not options:
            self.display = False
            return
        pills = Horizontal(
            *(Button(option, name=option, classes="pill") for option in options),
            classes="pills",
        )
        self.mount(pills, Label(f"[dim]{QUICK_REPLY_HINT}[/]"))
        self.display = True

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.Selected(str(event.button.name)))


class FeedbackPanel(Vertical):
    """One-shot "how did we do" choice."""

    class Selected(Message):
        def __init__(self, label: str) -> None:
            self.label = label
            super().__init__()

    selection: reactive[str | None] = reactive(None)

    def compose(self) -> ComposeResult:
        yield Static(f"[bold]{FEEDBACK_TITLE}[/]", id="feedback-title")
        with Horizontal(id="feedback-cards"):
            for label, emoji in FEEDBACK_OPTIONS.items():
                yield Button(f"{emoji} {label}", name=label, classes="feedback-card")
        yield Static("", id="feedback-thanks")

    def watch_selection(self, value: str | None) -> None:
        try:
            for button in self.query(".feedback-card").results(Button):
                button.variant = "success" if button.name == value else "default"
            self.query_one("#feedback-thanks", Static).update(FEEDBACK_THANKS if value else "")
        except Exception:
            pass

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.Selected(str(event.button.name)))


class StatsWidget(Static):
    """Live token usage for the session."""

    stats_text: reactive[str] = reactive("")

    def compose(self) -> ComposeResult:
        yield Label(self.stats_text, id="stats-label")

    def watch_stats_text(self, value: str) -> None:
        try:
            self.query_one("#stats-label", Label).update(value)
        except Exception:
            pass

    def update_stats(self, tracker) -> None:
        """Refresh from a TokenTracker (or clear when there is none)."""
        self.stats_text = f"[dim]{tracker.summary()}[/]" if tracker is not None else ""
