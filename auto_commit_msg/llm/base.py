"""Chat Completion Types and Errors"""

from dataclasses import dataclass, field
from enum import Enum


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class TransportError(LLMError):
    """Network failure or a non-200 response from the endpoint."""

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        text = super().__str__()
        if self.body:
            text = f"{text}\n{self.body}"
        return text


class MalformedResponseError(LLMError):
    """Response body does not have the expected chat-completion shape."""
    pass


class Role(str, Enum):
    DEVELOPER = "developer"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    """A single role-tagged message."""
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": Role(self.role).value, "content": self.content}

    @classmethod
    def from_dict(cls, data: dict) -> 'ChatMessage':
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a message object, got {type(data).__name__}")

        content = data.get("content")
        if not isinstance(content, str):
            raise MalformedResponseError("Message content is missing or not a string")

        try:
            role = Role(data.get("role") or Role.ASSISTANT)
        except ValueError:
            raise MalformedResponseError(f"Unknown message role: {data.get('role')!r}")

        return cls(role=role, content=content)


@dataclass
class Choice:
    message: ChatMessage


@dataclass
class ChatCompletionResult:
    """Decoded chat-completion response. choices may be empty."""
    choices: list[Choice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'ChatCompletionResult':
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")

        choices = data.get("choices")
        if not isinstance(choices, list):
            raise MalformedResponseError("Response has no 'choices' list")

        decoded = []
        for index, choice in enumerate(choices):
            if not isinstance(choice, dict) or "message" not in choice:
                raise MalformedResponseError(f"Choice {index} has no 'message'")
            decoded.append(Choice(message=ChatMessage.from_dict(choice["message"])))

        return cls(choices=decoded)
