"""Chat session scoped to one selected job and its analysis."""
from typing import List

from core.models import ChatMessage, ChatRole


class ChatSession:
    """Append-only message log. Cleared, never edited."""

    def __init__(self):
        self._messages: List[ChatMessage] = []

    def append_user(self, text: str) -> ChatMessage:
        message = ChatMessage(role=ChatRole.USER, text=text)
        self._messages.append(message)
        return message

    def append_model(self, text: str) -> ChatMessage:
        message = ChatMessage(role=ChatRole.MODEL, text=text)
        self._messages.append(message)
        return message

    def clear(self) -> None:
        self._messages = []

    def history(self) -> List[ChatMessage]:
        """Copy of the transcript, oldest first."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)
