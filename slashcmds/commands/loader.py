"""Discover and parse command files."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from slashcmds.config.settings import CommandPaths
from slashcmds.exceptions import CommandLoadError

from .frontmatter import parse_frontmatter
from .models import Command
from .tools import validate_allowed_tools

logger = logging.getLogger(__name__)

SOURCE_PROJECT = "project"
SOURCE_USER = "user"
SOURCE_XDG = "user"  # XDG commands are reported as user commands

COMMAND_SUFFIX = ".md"


@dataclass
class LoadResult:
    """Commands found under one directory, plus files that were skipped."""

    commands: list[Command] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)  # (path, reason)


def derive_command_name(path: str | Path, base_dir: str | Path) -> tuple[str, str]:
    """Derive (name, namespace) from a command file path.

    Examples:
        review-pr.md -> ("review-pr", "")
        frontend/components/button.md -> ("frontend:components:button", "frontend:components")
    """
    try:
        rel = os.path.relpath(path, base_dir)
    except ValueError:
        rel = str(path)

    rel = rel.replace("\\", "/")
    if rel.lower().endswith(COMMAND_SUFFIX):
        rel = rel[: -len(COMMAND_SUFFIX)]

    parts = [part for part in rel.split("/") if part and part != "."]
    if not parts:
        return "", ""

    leaf = parts[-1]
    if len(parts) == 1:
        return leaf, ""

    namespace = ":".join(parts[:-1])
    return f"{namespace}:{leaf}", namespace


def build_source_indicator(source: str, namespace: str) -> str:
    """Combine a source and namespace, e.g. ("project", "frontend") -> "project:frontend"."""
    if not namespace:
        return source
    return f"{source}:{namespace}"


def detect_command_source(
    path: str, project_dir: str, user_home_dir: str, xdg_dir: str
) -> str:
    """Work out which source a command file path belongs to."""
    path = path.lower()
    if path.startswith(project_dir.lower()):
        return SOURCE_PROJECT
    if path.startswith(xdg_dir.lower()):
        return SOURCE_XDG
    if path.startswith(user_home_dir.lower()):
        return SOURCE_USER
    return SOURCE_PROJECT


def parse_command_file(path: Path, base_dir: Path, source: str = SOURCE_PROJECT) -> Command:
    """Parse a .md command file into a Command.

    Args:
        path: Path to the .md file.
        base_dir: The commands/ directory the file was found under.
        source: Where command came from ("project" or "user").

    Returns:
        Parsed Command.
    """
    text = path.read_text(encoding="utf-8")
    frontmatter, body = parse_frontmatter(text)
    name, namespace = derive_command_name(path, base_dir)

    return Command(
        name=name,
        namespace=namespace,
        description=frontmatter.description,
        argument_hint=frontmatter.argument_hint,
        allowed_tools=tuple(validate_allowed_tools(frontmatter.allowed_tools, str(path))),
        content=body,
        path=str(path),
        source=build_source_indicator(source, namespace),
    )


def load_commands_from_dir(commands_dir: Path, source: str) -> LoadResult:
    """Recursively load every .md file under commands_dir.

    A missing directory yields an empty result. Files that fail to load are
    logged and skipped.

    Raises:
        CommandLoadError: If commands_dir exists but is not a directory.
    """
    result = LoadResult()
    commands_dir = Path(commands_dir)

    if not commands_dir.exists():
        logger.debug(f"No {source} commands directory at {commands_dir}")
        return result
    if not commands_dir.is_dir():
        raise CommandLoadError(f"{commands_dir} is not a directory")

    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Error accessing {error.filename} during command walk: {error}")
        result.skipped.append((str(error.filename), str(error)))

    for dirpath, dirnames, filenames in os.walk(commands_dir, onerror=_on_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if not filename.lower().endswith(COMMAND_SUFFIX):
                continue

            path = Path(dirpath) / filename
            try:
                cmd = parse_command_file(path, commands_dir, source=source)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load command file {path}: {e}")
                result.skipped.append((str(path), str(e)))
                continue

            result.commands.append(cmd)

    if result.skipped and result.commands:
        logger.warning(
            f"Some commands failed to load from {commands_dir}: "
            f"loaded {len(result.commands)}, skipped {len(result.skipped)}"
        )

    return result


def load_project_commands(paths: CommandPaths) -> LoadResult:
    """Load commands from <project>/.claude/commands."""
    return load_commands_from_dir(paths.project, SOURCE_PROJECT)


def load_user_home_commands(paths: CommandPaths) -> LoadResult:
    """Load commands from ~/.claude/commands."""
    return load_commands_from_dir(paths.user_home, SOURCE_USER)


def load_xdg_commands(paths: CommandPaths) -> LoadResult:
    """Load commands from $XDG_CONFIG_HOME/claude/commands."""
    return load_commands_from_dir(paths.xdg, SOURCE_XDG)
