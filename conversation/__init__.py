"""Conversation flow — session controller and completion collaborator."""

from conversation.completion import AnthropicCompletion, CompletionClient, CompletionError
from conversation.context_builder import build_messages, build_system_prompt
from conversation.controller import ConversationController
from conversation.feedback import FEEDBACK_OPTIONS, FeedbackState, FeedbackTrigger, should_show

__all__ = [
    "AnthropicCompletion",
    "CompletionClient",
    "CompletionError",
    "ConversationController",
    "FEEDBACK_OPTIONS",
    "FeedbackState",
    "FeedbackTrigger",
    "build_messages",
    "build_system_prompt",
    "should_show",
]
