"""OpenAI-compatible Chat Completion Client"""

import http.client
import json
import socket
import urllib.error
import urllib.request

from auto_commit_msg.llm.base import ChatCompletionResult, ChatMessage, MalformedResponseError, TransportError
from auto_commit_msg.llm.transport import HttpTransport, bearer_auth, json_content


class ChatClient:
    """Sends one chat-completion request per call. No retries."""

    def __init__(self, base_url: str, api_key: str, timeout: float | None = None, transport: HttpTransport | None = None):
        self.base_url = base_url.rstrip('/')
        base = transport or HttpTransport(timeout=timeout)
        self.transport = base.with_decorator(bearer_auth(api_key)).with_decorator(json_content())

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _post(self, payload: dict) -> tuple[int, str]:
        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(self.endpoint, data=data, method="POST")

        try:
            with self.transport.send(req) as response:
                status = response.status
                body = response.read().decode('utf-8', errors='replace')
        except urllib.error.HTTPError as e:
            body = e.read().decode('utf-8', errors='replace') if e.fp else ""
            raise TransportError(f"Chat completion failed with status {e.code}", status=e.code, body=body) from e
        except urllib.error.URLError as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e.reason}") from e
        except (socket.timeout, TimeoutError) as e:
            raise TransportError(f"Request to {self.endpoint} timed out") from e
        except http.client.HTTPException as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e
        except OSError as e:
            raise TransportError(f"Connection to {self.endpoint} lost: {e}") from e

        return status, body

    def complete(self, model: str, messages: list[ChatMessage]) -> ChatCompletionResult:
        """POST the messages and decode the response."""
        payload = {
            "model": model,
            "messages": [message.to_dict() for message in messages],
        }

        status, body = self._post(payload)
        if status != 200:
            raise TransportError(f"Chat completion failed with status {status}", status=status, body=body)

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

        return ChatCompletionResult.from_dict(data)
