"""Data models for slash commands."""
from dataclasses import dataclass, field
from typing import Any, Protocol

from slashcmds.exceptions import FileReadError

ASSISTANT = "assistant"


@dataclass(frozen=True)
class Command:
    """A slash command loaded from a .md file under a commands/ directory."""

    name: str  # full name, e.g. "frontend:review-pr"
    namespace: str = ""
    description: str = ""
    argument_hint: str = ""
    allowed_tools: tuple[str, ...] = ()
    content: str = ""
    path: str = ""
    source: str = "project"  # "project", "user", "project:frontend", ...


@dataclass(frozen=True)
class RequiredArguments:
    """Argument requirements derived from a command body and hint."""

    has_all_arguments: bool = False
    max_positional: int = 0
    required_count: int = 0  # -1 when has_all_arguments


@dataclass
class FileContent:
    """A resolved file and its text, or the error that prevented reading it."""

    path: str
    content: str = ""
    data: bytes = b""
    error: FileReadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Attachment:
    """File content passed alongside the prompt."""

    file_path: str
    file_name: str
    mime_type: str
    content: bytes


@dataclass
class TextContent:
    text: str


@dataclass
class CreateMessageParams:
    role: str
    parts: list[TextContent] = field(default_factory=list)
    model: str = ""
    provider: str = ""


class AgentCoordinator(Protocol):
    """Runs a prompt for a session through the agent."""

    async def run(
        self, session_id: str, prompt: str, attachments: list[Attachment]
    ) -> Any: ...


class MessageService(Protocol):
    """Stores a message in a session without calling the agent."""

    async def create(self, session_id: str, params: CreateMessageParams) -> Any: ...
