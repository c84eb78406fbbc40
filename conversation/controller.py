"""ConversationController — owns one chat session.

Steps for each submission:
1. Ignore empty text, or anything sent while a reply is pending
2. Append the user's turn
3. Ask the completion collaborator for a reply using the full history
4. Append the reply (or a fixed fallback / error turn)
5. Re-evaluate the feedback trigger
"""

from __future__ import annotations

import logging
from typing import Optional

from config.settings import Settings
from conversation.completion import AnthropicCompletion, CompletionClient
from conversation.feedback import FeedbackState, FeedbackTrigger
from conversation.prompts import CONNECTION_ERROR_REPLY, FALLBACK_REPLY
from core.turn import Speaker, Turn
from render.formatter import RenderedTurn, render_turn

logger = logging.getLogger(__name__)


class ConversationController:
    """Turn history, in-flight guard and feedback state for a single session."""

    def __init__(
        self,
        completion: CompletionClient | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self.completion: CompletionClient = completion or AnthropicCompletion(self.settings)
        self._turns: list[Turn] = []
        self.in_flight: bool = False
        self.last_error: Optional[Exception] = None
        self.feedback = FeedbackState()
        self._trigger = FeedbackTrigger(self.settings.FEEDBACK_MIN_ASSISTANT_TURNS)

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def started(self) -> bool:
        return bool(self._turns)

    async def submit(self, user_text: str) -> None:
        """Send one user message and record the reply.

        Never raises for collaborator failures: they become a visible error
        turn and the controller is ready for the next submission.
        """
        text = (user_text or "").strip()
        if not text or self.in_flight:
            return

        self._turns.append(Turn(speaker=Speaker.USER, text=text))
        self.in_flight = True
        try:
            try:
                reply = await self.completion.complete(self.turns)
            except Exception as e:
                self.last_error = e
                logger.exception("Completion failed after %d turns", len(self._turns))
                self._turns.append(Turn(speaker=Speaker.ASSISTANT, text=CONNECTION_ERROR_REPLY))
                return

            if not reply or not reply.strip():
                logger.warning("Empty completion payload, using fallback reply")
                reply = FALLBACK_REPLY
            self._turns.append(Turn(speaker=Speaker.ASSISTANT, text=reply))

            if self._trigger.evaluate(self._turns):
                self.feedback.shown = True
                logger.info("Feedback prompt shown (turn %d)", len(self._turns))
        finally:
            self.in_flight = False

    async def select_quick_reply(self, label: str) -> None:
        """A pill tap is the same as typing its label."""
        await self.submit(label)

    def select_feedback(self, label: str) -> None:
        self.feedback.select(label)

    def rendered(self) -> list[RenderedTurn]:
        """Render every stored turn from its text."""
        return [render_turn(turn) for turn in self._turns]

    def latest_quick_replies(self) -> Optional[tuple[str, ...]]:
        """Pills for the newest turn, if it is an assistant turn offering any."""
        if not self._turns or not self._turns[-1].is_assistant:
            return None
        return render_turn(self._turns[-1]).quick_replies

    async def close(self) -> None:
        """End the session and release the collaborator's transport."""
        logger.info("Conversation closed (%d turns)", len(self._turns))
        await self.completion.close()
