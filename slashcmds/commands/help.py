"""Built-in help command output."""
from .models import Command
from .registry import CommandRegistry

HELP_COMMAND = Command(
    name="help",
    description="Show a list of all available commands and their descriptions.",
    source="",
)


def group_commands_by_namespace(commands: list[Command]) -> dict[str, list[Command]]:
    """Group commands by namespace, each group sorted by name."""
    grouped: dict[str, list[Command]] = {}
    for cmd in commands:
        grouped.setdefault(cmd.namespace, []).append(cmd)
    for namespace in grouped:
        grouped[namespace].sort(key=lambda c: c.name)
    return grouped


class HelpHandler:
    """Renders every available command, grouped by namespace."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def generate_help(self) -> str:
        """Build the help text.

        Root commands come first, then one section per namespace in sorted
        order. The built-in help command is always listed.
        """
        commands = self.registry.list_commands() + [HELP_COMMAND]
        grouped = group_commands_by_namespace(commands)

        lines = ["Available Commands:\n\n"]

        if "" in grouped:
            lines.append("Root Commands:\n\n")
            lines.extend(self.format_command(cmd) for cmd in grouped[""])

        for namespace in sorted(ns for ns in grouped if ns):
            title = namespace[:1].upper() + namespace[1:]
            lines.append(f"{title} Commands:\n\n")
            lines.extend(self.format_command(cmd) for cmd in grouped[namespace])

        return "".join(lines)

    @staticmethod
    def format_command(cmd: Command) -> str:
        r"""Format one entry: ``  `\name [hint]` - description (source)``."""
        text = f"\\{cmd.name}"
        if cmd.argument_hint:
            text += f" {cmd.argument_hint}"

        line = f"  `{text}`"
        if cmd.description:
            line += f" - {cmd.description}"
        if cmd.source:
            line += f" ({cmd.source})"
        return line + "\n\n"
