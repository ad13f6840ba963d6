"""Execute slash commands through the agent."""
import asyncio
import difflib
import logging
from typing import Any

from slashcmds.exceptions import (
    ArgumentValidationError,
    CommandExecutionError,
    CommandNotFoundError,
    FileReferenceError,
    HelpMessageError,
)

from .arguments import (
    extract_required_arguments,
    has_all_required_arguments,
    process_command_content,
)
from .attachments import build_file_attachments
from .filerefs import parse_file_references, read_file_contents, resolve_file_paths
from .help import HelpHandler
from .models import (
    ASSISTANT,
    Attachment,
    AgentCoordinator,
    Command,
    CreateMessageParams,
    MessageService,
    RequiredArguments,
    TextContent,
)
from .registry import CommandRegistry
from .tools import build_filtered_tools

logger = logging.getLogger(__name__)

HELP_COMMAND_NAME = "help"
MAX_SUGGESTIONS = 3
EXECUTE_PREFIX = "Execute this directly - do not analyze or search:\n\n"


def validate_arguments(args: list[str], required: RequiredArguments, command_name: str) -> None:
    """Check the supplied arguments against what the command needs.

    Raises:
        ArgumentValidationError: If arguments are missing, or given to a
            command that takes none.
    """
    if required.has_all_arguments:
        return

    if required.required_count == 0:
        if args:
            logger.warning(
                f"Command '{command_name}' does not accept arguments, got {len(args)}"
            )
            raise ArgumentValidationError(
                f"command '{command_name}' does not accept arguments, "
                f"but {len(args)} argument(s) were provided"
            )
        return

    if len(args) < required.required_count:
        logger.warning(
            f"Command '{command_name}' requires {required.required_count} "
            f"argument(s), got {len(args)}"
        )
        missing = [f"${i}" for i in range(len(args) + 1, required.required_count + 1)]
        raise ArgumentValidationError(
            f"command '{command_name}' requires {required.required_count} "
            f"argument(s), but only {len(args)} provided. Missing: {', '.join(missing)}",
            missing=missing,
        )


def suggest_similar(name: str, candidates: list[str], limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Find up to ``limit`` command names resembling ``name``."""
    suggestions = difflib.get_close_matches(name, candidates, n=limit, cutoff=0.6)
    for candidate in candidates:
        if len(suggestions) >= limit:
            break
        if candidate not in suggestions and _is_subsequence(name, candidate):
            suggestions.append(candidate)
    return suggestions


def _is_subsequence(needle: str, haystack: str) -> bool:
    chars = iter(haystack.lower())
    return bool(needle) and all(c in chars for c in needle.lower())


class CommandExecutor:
    """Runs commands from the registry through the agent coordinator."""

    def __init__(
        self,
        registry: CommandRegistry,
        coordinator: AgentCoordinator,
        messages: MessageService,
        working_dir: str,
    ):
        """Initialize the executor.

        Args:
            registry: Command registry for lookups.
            coordinator: Agent that runs the resolved prompt.
            messages: Message service, used for the built-in help command.
            working_dir: Directory that relative @file references resolve against.
        """
        self.registry = registry
        self.coordinator = coordinator
        self.messages = messages
        self.working_dir = working_dir

    async def execute(
        self,
        session_id: str,
        command_name: str,
        args: list[str],
        timeout: float | None = None,
    ) -> Any:
        """Execute a command with the given arguments.

        Args:
            session_id: Session the command runs in.
            command_name: Full command name, e.g. "frontend:review-pr".
            args: Arguments supplied by the user.
            timeout: Seconds to allow the agent call, or None for no limit.

        Returns:
            The coordinator's result (None for the help command).

        Raises:
            CommandNotFoundError: Unknown command.
            ArgumentValidationError: Wrong number of arguments.
            FileReferenceError: A referenced file could not be read.
            CommandExecutionError: The agent call failed or timed out.
            HelpMessageError: The help message could not be created.
        """
        if command_name == HELP_COMMAND_NAME:
            return await self._execute_help(session_id)

        cmd = self._find(command_name)

        required = extract_required_arguments(cmd.content, cmd.argument_hint)
        validate_arguments(args, required, command_name)

        content = process_command_content(cmd.content, args)
        if (
            args
            and required.required_count != -1
            and not has_all_required_arguments(cmd.content, required.required_count)
        ):
            content += "\n\nArguments: " + " ".join(args)

        refs = parse_file_references(content)
        file_contents = await read_file_contents(resolve_file_paths(refs, self.working_dir))

        failed = [fc.path for fc in file_contents if not fc.ok]
        if failed:
            logger.error(f"Failed to read referenced files for '{command_name}': {failed}")
            raise FileReferenceError(failed)

        attachments = build_file_attachments(file_contents)
        prompt = EXECUTE_PREFIX + content

        # Computed for future per-command agent configs; not enforced yet
        tools = build_filtered_tools(cmd.allowed_tools)
        logger.debug(f"Tools for '{command_name}': {tools}")

        logger.info(
            f"Executing command '{command_name}' in session {session_id} "
            f"({len(args)} args, {len(attachments)} attachments)"
        )

        call = self._run_agent(session_id, command_name, prompt, attachments)
        if timeout is None:
            return await call

        try:
            return await asyncio.wait_for(call, timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Command '{command_name}' timed out after {timeout}s")
            raise CommandExecutionError(
                f"failed to execute command '{command_name}': timed out after {timeout}s"
            ) from e

    async def _run_agent(
        self, session_id: str, command_name: str, prompt: str, attachments: list[Attachment]
    ) -> Any:
        try:
            return await self.coordinator.run(session_id, prompt, attachments)
        except Exception as e:
            logger.error(f"Command '{command_name}' execution failed: {e}")
            raise CommandExecutionError(
                f"failed to execute command '{command_name}': {e}"
            ) from e

    def _find(self, command_name: str) -> Command:
        try:
            return self.registry.find_command(command_name)
        except CommandNotFoundError as e:
            logger.warning(f"Command not found: {command_name}")
            suggestions = suggest_similar(command_name, self.registry.names())
            message = f"command '{command_name}' not found"
            if suggestions:
                message += f". Did you mean: {', '.join(suggestions)}?"
            raise CommandNotFoundError(command_name, suggestions, message) from e

    async def _execute_help(self, session_id: str) -> None:
        """Post the help text as an assistant message, bypassing the agent."""
        logger.info(f"Executing help command in session {session_id}")

        help_text = HelpHandler(self.registry).generate_help()
        try:
            await self.messages.create(
                session_id,
                CreateMessageParams(role=ASSISTANT, parts=[TextContent(text=help_text)]),
            )
        except Exception as e:
            logger.error(f"Help command failed in session {session_id}: {e}")
            raise HelpMessageError(f"failed to create help message: {e}") from e
