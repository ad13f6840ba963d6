"""Test configuration loading."""
import pytest
from pathlib import Path
from slashcmds.config.settings import (
    Config,
    CommandsConfig,
    load_config,
    resolve_command_paths,
)


@pytest.fixture
def config_file(tmp_path):
    """Create a temporary config file."""
    config_content = """
working_dir: /home/user/myapp

commands:
  dir_name: .agent
  home_dir: /home/user

claude:
  max_turns: 25
  permission_mode: "acceptEdits"
  max_budget_usd: 5.0
  model: sonnet
"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(config_content)
    return config_path


def test_load_config(config_file):
    """Config loads from YAML file."""
    config = load_config(config_file)

    assert config.working_dir == "/home/user/myapp"
    assert config.commands.dir_name == ".agent"
    assert config.commands.home_dir == "/home/user"
    assert config.claude.max_turns == 25
    assert config.claude.permission_mode == "acceptEdits"
    assert config.claude.max_budget_usd == 5.0
    assert config.claude.model == "sonnet"


def test_load_config_defaults(tmp_path):
    """Config applies defaults for missing values."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("claude:\n  max_turns: 3\n")

    config = load_config(config_path)

    assert config.claude.max_turns == 3
    assert config.claude.permission_mode == "default"
    assert config.commands.dir_name == ".claude"


def test_load_config_missing_file(tmp_path):
    """Missing config file yields defaults."""
    config = load_config(tmp_path / "nope.yaml")

    assert config.claude.max_turns == 50
    assert config.commands == CommandsConfig()


def test_resolve_command_paths(tmp_path):
    """Each source resolves under its own root."""
    config = Config(
        working_dir=str(tmp_path / "project"),
        commands=CommandsConfig(home_dir=str(tmp_path / "home")),
    )

    paths = resolve_command_paths(config, environ={})

    assert paths.project == tmp_path / "project" / ".claude" / "commands"
    assert paths.user_home == tmp_path / "home" / ".claude" / "commands"
    assert paths.xdg == tmp_path / "home" / ".config" / "claude" / "commands"


def test_resolve_command_paths_xdg_env(tmp_path):
    """XDG_CONFIG_HOME from the environment is honoured."""
    config = Config(
        working_dir=str(tmp_path),
        commands=CommandsConfig(home_dir=str(tmp_path / "home")),
    )

    paths = resolve_command_paths(config, environ={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})

    assert paths.xdg == tmp_path / "xdg" / "claude" / "commands"


def test_resolve_command_paths_explicit_project(tmp_path):
    """commands.project_dir overrides the working directory."""
    config = Config(
        working_dir=str(tmp_path / "cwd"),
        commands=CommandsConfig(
            project_dir=str(tmp_path / "elsewhere"),
            home_dir=str(tmp_path / "home"),
        ),
    )

    paths = resolve_command_paths(config, environ={})

    assert paths.project == Path(tmp_path / "elsewhere" / ".claude" / "commands")
