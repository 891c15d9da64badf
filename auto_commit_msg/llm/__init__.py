"""LLM Client Package"""

from auto_commit_msg.llm.base import (
    LLMError,
    TransportError,
    MalformedResponseError,
    Role,
    ChatMessage,
    Choice,
    ChatCompletionResult,
)
from auto_commit_msg.llm.openai import ChatClient
from auto_commit_msg.llm.selector import select_model
from auto_commit_msg.llm.transport import HttpTransport, RequestDecorator, bearer_auth, json_content

__all__ = [
    "LLMError",
    "TransportError",
    "MalformedResponseError",
    "Role",
    "ChatMessage",
    "Choice",
    "ChatCompletionResult",
    "ChatClient",
    "select_model",
    "HttpTransport",
    "RequestDecorator",
    "bearer_auth",
    "json_content",
]
