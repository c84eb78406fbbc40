"""MoneyBuddyApp — main Textual application.

Owns one ConversationController for the lifetime of the app and closes it
on exit.
"""

from __future__ import annotations

import logging

from textual.app import App

from config.settings import Settings
from conversation.controller import ConversationController
from ui.chat_screen import ChatScreen

logger = logging.getLogger(__name__)


class MoneyBuddyApp(App):
    """Main Textual application for MoneyBuddy."""

    TITLE = "MoneyBuddy"
    SUB_TITLE = "💬 AI-powered money coach"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        settings: Settings | None = None,
        controller: ConversationController | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.settings = settings or Settings()
        self.controller = controller or ConversationController(settings=self.settings)

    def on_mount(self) -> None:
        self.push_screen(ChatScreen(controller=self.controller))
        logger.info("MoneyBuddy session started")

    async def on_unmount(self) -> None:
        """Session teardown."""
        await self.controller.close()
