"""Tool names commands may restrict themselves to."""
import logging

logger = logging.getLogger(__name__)

# Tools the Claude agent exposes
AVAILABLE_TOOLS: tuple[str, ...] = (
    "Bash",
    "Read",
    "Write",
    "Edit",
    "MultiEdit",
    "Glob",
    "Grep",
    "LS",
    "WebFetch",
    "WebSearch",
    "NotebookEdit",
    "TodoWrite",
    "Task",
)


def tool_base_name(tool: str) -> str:
    """Strip a permission rule, e.g. "Bash(git:*)" -> "Bash"."""
    return tool.split("(", 1)[0].strip()


def validate_allowed_tools(
    allowed_tools: list[str],
    command_path: str,
    available: tuple[str, ...] = AVAILABLE_TOOLS,
) -> list[str]:
    """Drop tool names that are not in the catalog, logging a warning.

    Args:
        allowed_tools: allowed-tools values from frontmatter.
        command_path: Command file, for the log message.
        available: Valid tool names.

    Returns:
        The valid entries, in their original order.
    """
    valid = []
    invalid = []
    for tool in allowed_tools:
        tool = tool.strip()
        if not tool:
            continue
        if tool_base_name(tool) in available:
            valid.append(tool)
        else:
            invalid.append(tool)

    if invalid:
        logger.warning(
            f"Invalid tool names in allowed-tools of {command_path}: "
            f"{invalid} (kept {valid})"
        )

    return valid


def build_filtered_tools(
    allowed_tools: tuple[str, ...] | list[str],
    available: tuple[str, ...] = AVAILABLE_TOOLS,
) -> list[str]:
    """Tools an agent may use for a command; all of them when unrestricted."""
    if not allowed_tools:
        return list(available)
    return [tool for tool in allowed_tools if tool_base_name(tool) in available]
