"""Claude SDK client wrapper and agent coordinator."""
import base64
import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ClaudeSDKClient,
    ResultMessage,
    TextBlock,
)

from slashcmds.commands.models import Attachment
from slashcmds.commands.tools import build_filtered_tools
from slashcmds.config.settings import Config

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = {"image/png", "image/jpeg", "image/gif", "image/webp"}


@dataclass
class AgentResult:
    """What the agent produced for one prompt."""

    text: str = ""
    session_id: str = ""
    total_cost_usd: float = 0.0


def create_claude_options(config: Config, cwd: str | None = None) -> ClaudeAgentOptions:
    """Build ClaudeAgentOptions from config.

    Args:
        config: Application configuration.
        cwd: Working directory for the agent. Defaults to config.working_dir.

    Returns:
        Configured ClaudeAgentOptions.
    """
    return ClaudeAgentOptions(
        permission_mode=config.claude.permission_mode,
        max_turns=config.claude.max_turns,
        max_budget_usd=config.claude.max_budget_usd,
        cwd=cwd or config.working_dir,
        model=config.claude.model,
    )


def build_restricted_options(
    options: ClaudeAgentOptions, allowed_tools: tuple[str, ...] | list[str]
) -> ClaudeAgentOptions:
    """Copy options with allowed_tools narrowed to a command's allowed-tools.

    Not used by the executor yet; commands run with the default tool set.
    """
    return dataclasses.replace(options, allowed_tools=build_filtered_tools(allowed_tools))


def attachment_block(attachment: Attachment) -> dict[str, Any]:
    """Convert an attachment to a user message content block."""
    mime_type = attachment.mime_type.split(";", 1)[0].strip()
    if mime_type in IMAGE_MIME_TYPES:
        return {
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": mime_type,
                "data": base64.b64encode(attachment.content).decode("ascii"),
            },
        }

    text = attachment.content.decode("utf-8", errors="replace")
    return {
        "type": "text",
        "text": f'<file path="{attachment.file_path}">\n{text}\n</file>',
    }


async def _user_message(
    session_id: str, prompt: str, attachments: list[Attachment]
) -> AsyncIterator[dict[str, Any]]:
    content = [{"type": "text", "text": prompt}]
    content.extend(attachment_block(a) for a in attachments)
    yield {
        "type": "user",
        "message": {"role": "user", "content": content},
        "parent_tool_use_id": None,
        "session_id": session_id,
    }


class AgentClient:
    """Wrapper for Claude SDK client."""

    def __init__(self, config: Config, cwd: str | None = None):
        """Initialize with configuration.

        Args:
            config: Application configuration.
            cwd: Working directory for the agent.
        """
        self.config = config
        self.cwd = cwd
        self._client: Optional[ClaudeSDKClient] = None
        self._options: Optional[ClaudeAgentOptions] = None

    async def __aenter__(self) -> "AgentClient":
        """Enter async context - create SDK client."""
        self._options = create_claude_options(self.config, self.cwd)
        self._client = ClaudeSDKClient(options=self._options)
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context - cleanup."""
        if self._client:
            await self._client.__aexit__(*args)

    async def query(
        self,
        prompt: str,
        attachments: list[Attachment] | None = None,
        session_id: str = "default",
    ) -> None:
        """Send prompt, with any attachments, to Claude."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")
        if attachments:
            await self._client.query(
                _user_message(session_id, prompt, attachments), session_id=session_id
            )
        else:
            await self._client.query(prompt, session_id=session_id)

    def receive_response(self):
        """Get async iterator for response messages."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client.receive_response()


class ClaudeCoordinator:
    """Runs command prompts through Claude and collects the reply."""

    def __init__(self, config: Config, cwd: str | None = None):
        self.config = config
        self.cwd = cwd

    async def run(
        self, session_id: str, prompt: str, attachments: list[Attachment]
    ) -> AgentResult:
        result = AgentResult(session_id=session_id)
        texts = []

        async with AgentClient(self.config, self.cwd) as client:
            await client.query(prompt, attachments, session_id=session_id)

            async for message in client.receive_response():
                if isinstance(message, AssistantMessage):
                    for block in message.content:
                        if isinstance(block, TextBlock):
                            texts.append(block.text)
                elif isinstance(message, ResultMessage):
                    result.total_cost_usd = message.total_cost_usd or 0.0
                    result.session_id = message.session_id or session_id

        result.text = "\n".join(texts)
        logger.info(
            f"Agent finished session {result.session_id} "
            f"(cost ${result.total_cost_usd:.4f})"
        )
        return result
