"""slashcmds entry point."""
import asyncio
import logging
import os
import sys
import uuid

from dotenv import load_dotenv

from slashcmds.claude import ClaudeCoordinator
from slashcmds.commands import CommandExecutor, CommandRegistry, parse_command_input
from slashcmds.commands.models import CreateMessageParams
from slashcmds.config.settings import load_config, resolve_command_paths
from slashcmds.exceptions import SlashCommandError

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


class ConsoleMessages:
    """Message service that prints messages instead of storing them."""

    async def create(self, session_id: str, params: CreateMessageParams) -> str:
        text = "".join(part.text for part in params.parts)
        print(text)
        return text


def split_invocation(argv: list[str]) -> tuple[str, list[str]]:
    r"""Split command-line words into a command name and arguments.

    The first word is parsed as an invocation string, so `\cmd "a b"` works
    as one shell argument. Further shell words are taken as arguments verbatim.
    """
    if not argv:
        return "", []

    name, args = parse_command_input(argv[0])
    if not name:
        return "", []
    return name, args + list(argv[1:])


async def run(argv: list[str]) -> int:
    """Run one command invocation. Returns a process exit code."""
    load_dotenv()

    config = load_config(os.getenv("SLASHCMDS_CONFIG") or None)
    registry = CommandRegistry(resolve_command_paths(config))
    try:
        registry.load_commands()
    except SlashCommandError as e:
        logger.error(f"Could not load commands: {e}")
        return 1

    name, args = split_invocation(argv)
    if not name:
        logger.error(f"Not a command (expected a leading backslash): {argv!r}")
        return 2

    executor = CommandExecutor(
        registry,
        ClaudeCoordinator(config),
        ConsoleMessages(),
        config.working_dir,
    )
    session_id = os.getenv("SLASHCMDS_SESSION_ID") or str(uuid.uuid4())

    try:
        result = await executor.execute(session_id, name, args)
    except SlashCommandError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if result is not None:
        print(result.text)
    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
