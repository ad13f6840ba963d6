"""Command registry for storing and looking up commands."""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

from slashcmds.config.settings import CommandPaths
from slashcmds.exceptions import CommandLoadError, CommandNotFoundError

from .loader import (
    LoadResult,
    load_project_commands,
    load_user_home_commands,
    load_xdg_commands,
)
from .models import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    """One complete load result. Replaced wholesale, never mutated."""

    by_name: Mapping[str, Command] = field(default_factory=lambda: MappingProxyType({}))
    ordered: tuple[Command, ...] = ()


class CommandRegistry:
    """Loads commands from every source and looks them up by name.

    Sources are merged lowest priority first so that later ones win:
    XDG config < user home < project.
    """

    def __init__(self, paths: CommandPaths):
        self.paths = paths
        self._snapshot = _Snapshot()
        # (label, loader) in merge order
        self._loaders: list[tuple[str, Callable[[CommandPaths], LoadResult]]] = [
            ("XDG config", load_xdg_commands),
            ("user home", load_user_home_commands),
            ("project", load_project_commands),
        ]

    def load_commands(self) -> list[Command]:
        """Load commands from all sources and publish them as one snapshot.

        Returns:
            The merged command list.

        Raises:
            CommandLoadError: If every source failed to load.
        """
        logger.info(f"Loading commands (project: {self.paths.project})")

        merged: list[Command] = []
        errors: list[Exception] = []
        counts: dict[str, int] = {}

        for label, loader in self._loaders:
            try:
                result = loader(self.paths)
            except Exception as e:
                logger.warning(f"Failed to load {label} commands: {e}")
                errors.append(e)
                continue
            counts[label] = len(result.commands)
            merged.extend(result.commands)
            logger.debug(f"Loaded {len(result.commands)} {label} commands")

        if errors and len(errors) == len(self._loaders):
            logger.error(f"All command loaders failed ({len(errors)} errors)")
            raise CommandLoadError(
                "failed to load commands from any source: "
                + "; ".join(str(e) for e in errors),
                errors=errors,
            )

        by_name: dict[str, Command] = {}
        conflicts = []
        for cmd in merged:
            existing = by_name.get(cmd.name)
            if existing is not None:
                conflicts.append(cmd.name)
                logger.warning(
                    f"Command name conflict for '{cmd.name}': "
                    f"{cmd.source} ({cmd.path}) overrides "
                    f"{existing.source} ({existing.path})"
                )
            by_name[cmd.name] = cmd

        if conflicts:
            logger.info(f"Resolved {len(conflicts)} command conflicts: {conflicts}")
        if errors:
            logger.info(
                f"Some command loaders had errors, but {len(merged)} commands were loaded"
            )

        self._snapshot = _Snapshot(
            by_name=MappingProxyType(by_name),
            ordered=tuple(by_name.values()),
        )

        logger.info(f"Loaded {len(by_name)} commands {counts}")
        return self.list_commands()

    def reload(self) -> None:
        """Discard the current commands and load every source again."""
        self.load_commands()

    def find_command(self, name: str) -> Command:
        """Get command by exact name.

        Raises:
            CommandNotFoundError: If no command has that name.
        """
        cmd = self._snapshot.by_name.get(name)
        if cmd is None:
            raise CommandNotFoundError(name)
        return cmd

    def list_commands(self) -> list[Command]:
        """Get a copy of all registered commands."""
        return list(self._snapshot.ordered)

    def names(self) -> list[str]:
        """Get all registered command names."""
        return [cmd.name for cmd in self._snapshot.ordered]

    def complete(self, text: str) -> list[tuple[str, str]]:
        """Complete a partially typed command name.

        Prefix matches come first, then names that merely contain the text.

        Returns:
            (name, display) pairs, display being "name - description".
        """
        text = text.lstrip("\\")
        prefixed = []
        containing = []
        for cmd in sorted(self._snapshot.ordered, key=lambda c: c.name):
            if cmd.name.startswith(text):
                prefixed.append(cmd)
            elif text in cmd.name:
                containing.append(cmd)

        return [
            (cmd.name, f"{cmd.name} - {cmd.description}" if cmd.description else cmd.name)
            for cmd in prefixed + containing
        ]
