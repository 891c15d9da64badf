"""Commit Message Workflow

Staged diff -> model selection -> chat completion -> optional trace -> write.
Every check runs before the write, so a failed run never leaves a partial
message file behind.
"""

import json
import os
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Mapping, Optional

from auto_commit_msg import DEVELOPER_PROMPT, TOOL_NAME, __version__
from auto_commit_msg.config import Config, ConfigurationError
from auto_commit_msg.git import GitAnalyzer, EmptyInputError, parse_shortstat
from auto_commit_msg.llm import ChatClient, ChatMessage, MalformedResponseError, Role, select_model
from auto_commit_msg.output import print_info

TRACE_SEPARATOR = "\n---\n"

# Set by the pre-commit framework when it runs prepare-commit-msg hooks
HOOK_ENV = "PRE_COMMIT"
HOOK_SOURCE_ENV = "PRE_COMMIT_COMMIT_MSG_SOURCE"


@dataclass
class TraceRecord:
    """Timing and model details appended to the message when tracing."""
    model: str
    version: str
    response_time: float
    execution_time: float

    def to_json(self) -> str:
        return json.dumps({TOOL_NAME: asdict(self)})


def resolve_commit_source(arg: Optional[str], environ: Optional[Mapping[str, str]] = None) -> str:
    """Commit source from the hook argument, else from the pre-commit env."""
    if arg:
        return arg

    environ = os.environ if environ is None else environ
    if environ.get(HOOK_ENV, "").strip().lower() in ("", "0", "false", "no", "off"):
        return ""
    return environ.get(HOOK_SOURCE_ENV, "").strip()


def build_messages(diff: str) -> list[ChatMessage]:
    return [
        ChatMessage(role=Role.DEVELOPER, content=DEVELOPER_PROMPT),
        ChatMessage(role=Role.USER, content=diff),
    ]


def append_trace(message: str, record: TraceRecord) -> str:
    return f"{message}{TRACE_SEPARATOR}{record.to_json()}"


def write_message(message: str, destination: Optional[Path]) -> None:
    """Overwrite the destination file, or print when there is none."""
    if destination is None:
        print(message)
        return
    Path(destination).write_text(message, encoding='utf-8')


class CommitMessageWorkflow:
    """Generates one commit message for the staged changes.

    Args:
        config: Effective configuration, read only.
        analyzer: Git access; a GitAnalyzer is created on first use.
        client_factory: Builds the chat client from (base_url, secret).
        environ: Environment used for the API key lookup.
        clock: Monotonic clock used for trace timings.
    """

    def __init__(
        self,
        config: Config,
        analyzer: Optional[GitAnalyzer] = None,
        client_factory: Callable[[str, str], ChatClient] = ChatClient,
        environ: Optional[Mapping[str, str]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.config = config
        self._analyzer = analyzer
        self.client_factory = client_factory
        self.environ = os.environ if environ is None else environ
        self.clock = clock

    @property
    def analyzer(self) -> GitAnalyzer:
        if self._analyzer is None:
            self._analyzer = GitAnalyzer()
        return self._analyzer

    def _create_client(self) -> ChatClient:
        secret = self.config.resolve_secret(self.environ)
        if not secret:
            raise ConfigurationError(
                f"No API key found. Set the {self.config.api_key} environment variable:\n"
                f"  export {self.config.api_key}='your-key-here'"
            )
        if not self.config.base_url.strip():
            raise ConfigurationError("base_url is empty. Set it in your config file.")
        return self.client_factory(self.config.base_url, secret)

    def generate(self) -> str:
        """Produce the final message text without writing it anywhere."""
        started = self.clock()

        diff = self.analyzer.get_staged_diff()
        if not diff.strip():
            raise EmptyInputError("No staged changes. Run 'git add' first.")

        stats = parse_shortstat(self.analyzer.get_staged_shortstat())
        model = select_model(stats, self.config)
        client = self._create_client()

        requested = self.clock()
        result = client.complete(model, build_messages(diff))
        finished = self.clock()

        if not result.choices:
            raise MalformedResponseError("Unexpected empty response: no choices returned")
        message = result.choices[0].message.content

        if self.config.trace:
            record = TraceRecord(
                model=model,
                version=__version__,
                response_time=round(finished - requested, 2),
                execution_time=round(finished - started, 2),
            )
            message = append_trace(message, record)

        return message

    def run(self, destination: Optional[Path] = None, commit_source: Optional[str] = None) -> Optional[str]:
        """Generate and write the message. Returns None when skipped."""
        source = resolve_commit_source(commit_source, self.environ)
        if source:
            print_info(f"Commit source is '{source}', leaving the message alone")
            return None

        message = self.generate()
        write_message(message, destination)
        return message
