"""Slash commands: discovery, lookup and execution."""
from .models import Attachment, Command, FileContent, RequiredArguments
from .frontmatter import Frontmatter, parse_frontmatter
from .parser import parse_command_input
from .loader import derive_command_name, load_commands_from_dir
from .registry import CommandRegistry
from .help import HelpHandler
from .executor import CommandExecutor

__all__ = [
    "Attachment",
    "Command",
    "FileContent",
    "RequiredArguments",
    "Frontmatter",
    "parse_frontmatter",
    "parse_command_input",
    "derive_command_name",
    "load_commands_from_dir",
    "CommandRegistry",
    "HelpHandler",
    "CommandExecutor",
]
