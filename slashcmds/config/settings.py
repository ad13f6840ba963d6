"""Configuration settings."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".slashcmds" / "config.yaml"


@dataclass
class CommandsConfig:
    """Where command files are discovered."""

    project_dir: str = ""  # empty means working_dir
    dir_name: str = ".claude"  # per-root folder holding commands/
    home_dir: str = ""  # empty means the user's home
    xdg_config_home: str = ""  # empty means $XDG_CONFIG_HOME or ~/.config


@dataclass
class ClaudeConfig:
    """Claude SDK settings."""

    max_turns: int = 50
    permission_mode: str = "default"
    max_budget_usd: float = 10.0
    model: str | None = None


@dataclass
class Config:
    """Main configuration."""

    working_dir: str = field(default_factory=os.getcwd)
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    claude: ClaudeConfig = field(default_factory=ClaudeConfig)


@dataclass(frozen=True)
class CommandPaths:
    """Resolved command directories, one per source."""

    project: Path
    user_home: Path
    xdg: Path


def resolve_command_paths(
    config: Config, environ: Mapping[str, str] | None = None
) -> CommandPaths:
    """Resolve the three command roots from config and environment.

    Args:
        config: Application configuration.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        CommandPaths for project, user home and XDG config sources.
    """
    if environ is None:
        environ = os.environ

    cmds = config.commands
    home = Path(cmds.home_dir).expanduser() if cmds.home_dir else Path.home()
    project = Path(cmds.project_dir or config.working_dir).expanduser()

    xdg_home = cmds.xdg_config_home or environ.get("XDG_CONFIG_HOME", "")
    xdg_root = Path(xdg_home).expanduser() if xdg_home else home / ".config"

    # XDG uses the bare app name rather than a dot-directory
    app_name = cmds.dir_name.lstrip(".") or cmds.dir_name

    return CommandPaths(
        project=project / cmds.dir_name / "commands",
        user_home=home / cmds.dir_name / "commands",
        xdg=xdg_root / app_name / "commands",
    )


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    else:
        path = Path(path)

    if not path.exists():
        logger.info(f"No config at {path}, using defaults")
        return Config()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dictionary into Config object."""
    config = Config()

    if data.get("working_dir"):
        config.working_dir = str(Path(data["working_dir"]).expanduser())

    if "commands" in data:
        config.commands = CommandsConfig(
            project_dir=data["commands"].get("project_dir", ""),
            dir_name=data["commands"].get("dir_name", ".claude"),
            home_dir=data["commands"].get("home_dir", ""),
            xdg_config_home=data["commands"].get("xdg_config_home", ""),
        )

    if "claude" in data:
        config.claude = ClaudeConfig(
            max_turns=data["claude"].get("max_turns", 50),
            permission_mode=data["claude"].get("permission_mode", "default"),
            max_budget_usd=data["claude"].get("max_budget_usd", 10.0),
            model=data["claude"].get("model"),
        )

    return config
