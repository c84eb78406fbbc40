"""Chat screen — the single MoneyBuddy conversation view.

The transcript, pills and feedback panel are redrawn from the controller's
stored turns after every change; nothing derived is kept on the screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static
from textual.worker import Worker, WorkerState

from conversation.prompts import (
    ASSISTANT_NAME,
    PLACEHOLDER_EMPTY,
    PLACEHOLDER_ONGOING,
    STARTER_PROMPTS,
)
from ui.markup import pending_user_text
from ui.widgets import (
    ConversationView,
    FeedbackPanel,
    QuickReplyBar,
    StarterPanel,
    StatsWidget,
)

if TYPE_CHECKING:
    from conversation.controller import ConversationController


class ChatScreen(Screen):
    """Landing prompts, transcript, pills, feedback and the input box."""

    BINDINGS = [
        ("ctrl+q", "quit_app", "Quit"),
    ]

    CSS = """
    #chat-body {
        width: 1fr;
    }
    StarterPanel {
        height: auto;
        padding: 1 2;
    }
    StarterPanel Button.starter {
        width: 1fr;
        margin-top: 1;
    }
    ConversationView {
        height: 1fr;
        padding: 0 1;
    }
    #chat-typing {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }
    QuickReplyBar {
        height: auto;
        padding: 0 1;
    }
    QuickReplyBar .pills {
        height: auto;
    }
    QuickReplyBar Button.pill {
        margin-right: 1;
        min-width: 8;
    }
    FeedbackPanel {
        height: auto;
        padding: 1 1 0 1;
    }
    #feedback-cards {
        height: auto;
    }
    FeedbackPanel Button.feedback-card {
        width: 1fr;
        margin-right: 1;
    }
    StatsWidget {
        height: auto;
        padding: 0 1;
    }
    #chat-help {
        dock: bottom;
        height: auto;
        color: $text-muted;
        padding: 0 1;
    }
    #chat-input {
        dock: bottom;
    }
    """

    def __init__(self, controller: ConversationController, **kwargs):
        super().__init__(**kwargs)
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="chat-body"):
            yield StarterPanel(STARTER_PROMPTS, id="chat-starters")
            yield ConversationView(id="chat-conversation", wrap=True, markup=True)
            yield Static(f"{ASSISTANT_NAME}  💸 💸 💸", id="chat-typing")
            yield QuickReplyBar(id="chat-pills")
            yield FeedbackPanel(id="chat-feedback")
            yield StatsWidget(id="chat-stats")
        yield Static(
            "Enter to send · /help · you make the final call 🙌",
            id="chat-help",
        )
        yield Input(placeholder=PLACEHOLDER_EMPTY, id="chat-input")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()
        self.query_one("#chat-input", Input).focus()

    # --- Submission ---

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        if not text:
            return

        if text.startswith("/"):
            event.input.value = ""
            self._handle_command(text)
            return

        if self.controller.in_flight:
            return

        event.input.value = ""
        self._send(text)

    def on_starter_panel_selected(self, event: StarterPanel.Selected) -> None:
        self._send(event.text)

    def on_quick_reply_bar_selected(self, event: QuickReplyBar.Selected) -> None:
        self._send(event.label)

    def on_feedback_panel_selected(self, event: FeedbackPanel.Selected) -> None:
        self.controller.select_feedback(event.label)
        self.query_one("#chat-feedback", FeedbackPanel).selection = event.label

    def _send(self, text: str) -> None:
        if self.controller.in_flight:
            return
        self.run_worker(
            self.controller.submit(text),
            name="submit",
            exclusive=False,
        )
        # The worker has not started yet, so the user turn is not stored.
        self.refresh_view(pending_text=text)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.name != "submit":
            return
        if event.state in (WorkerState.SUCCESS, WorkerState.ERROR, WorkerState.CANCELLED):
            if event.state == WorkerState.ERROR:
                self.query_one("#chat-conversation", ConversationView).add_system_message(
                    f"Error: {event.worker.error}"
                )
            self.refresh_view()

    # --- Drawing ---

    def refresh_view(self, pending_text: str | None = None) -> None:
        """Redraw everything from the controller's turns."""
        controller = self.controller
        pending = pending_text is not None or controller.in_flight
        started = controller.started or pending_text is not None

        self.query_one("#chat-starters", StarterPanel).display = not started

        conv = self.query_one("#chat-conversation", ConversationView)
        conv.display = started
        conv.show_turns(controller.rendered())
        if pending_text is not None and not controller.in_flight:
            conv.write(pending_user_text(pending_text))

        self.query_one("#chat-typing", Static).display = pending
        self.query_one("#chat-pills", QuickReplyBar).set_options(
            None if pending else controller.latest_quick_replies()
        )

        feedback = self.query_one("#chat-feedback", FeedbackPanel)
        feedback.display = controller.feedback.shown and not pending
        feedback.selection = controller.feedback.selection

        tracker = getattr(controller.completion, "tokens", None)
        self.query_one("#chat-stats", StatsWidget).update_stats(tracker)

        inp = self.query_one("#chat-input", Input)
        inp.placeholder = PLACEHOLDER_ONGOING if started else PLACEHOLDER_EMPTY

    # --- Commands ---

    def _handle_command(self, text: str) -> None:
        cmd = text.split()[0].lower()
        conv = self.query_one("#chat-conversation", ConversationView)

        if cmd in ("/quit", "/q"):
            self.app.exit()

        elif cmd in ("/help", "/h"):
            conv.display = True
            conv.add_system_message("--- Commands ---")
            conv.add_system_message("  Type anything to talk to MoneyBuddy")
            conv.add_system_message("  Click a pill to answer with that option")
            conv.add_system_message("  /quit — Exit")
            conv.add_system_message("---")

        else:
            conv.display = True
            conv.add_system_message(f"Unknown command: {cmd}. Type /help for commands.")

    def action_quit_app(self) -> None:
        self.app.exit()
