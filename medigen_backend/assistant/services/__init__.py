from .gemini import (
    EMPTY_REPLY,
    FAILURE_REPLY,
    MISSING_KEY_REPLY,
    AssistantUnavailable,
    ask_assistant,
)

__all__ = [
    "EMPTY_REPLY",
    "FAILURE_REPLY",
    "MISSING_KEY_REPLY",
    "AssistantUnavailable",
    "ask_assistant",
]
