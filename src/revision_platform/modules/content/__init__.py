"""Content Module - Prompt building and deterministic mock content."""

from revision_platform.modules.content.mock import (
    CHAT_REPLY_RULES,
    ReplyRule,
    mock_chat_reply,
    mock_content,
    select_reply_rule,
)
from revision_platform.modules.content.prompts import (
    build_chat_message,
    build_prompt,
    default_request,
    initial_request,
)

__all__ = [
    "CHAT_REPLY_RULES",
    "ReplyRule",
    "build_chat_message",
    "build_prompt",
    "default_request",
    "initial_request",
    "mock_chat_reply",
    "mock_content",
    "select_reply_rule",
]
