"""Argument placeholders: detection, requirements and substitution.

Two placeholder families are supported in command bodies:

* ``$ARGUMENTS`` / ``$ARGS`` - every argument, joined by a single space.
* ``$1``, ``$2``, ... - one positional argument (1-based).
"""
import re

from .models import RequiredArguments

POSITIONAL_PATTERN = re.compile(r"\$([0-9]+)")
# Positions must fit a signed 64-bit integer; longer runs stay literal
MAX_POSITION = 2**63 - 1
ALL_ARGUMENTS_PATTERN = re.compile(r"\$(?:ARGUMENTS|ARGS)")
HINT_ARGUMENT_PATTERN = re.compile(r"\[[^\]]+\]")


def has_argument_placeholders(content: str) -> bool:
    """Check whether content contains any argument placeholder."""
    return bool(
        ALL_ARGUMENTS_PATTERN.search(content) or POSITIONAL_PATTERN.search(content)
    )


def _parse_position(digits: str) -> int | None:
    """Parse a placeholder's digits, or None if they do not fit a position."""
    if len(digits) > len(str(MAX_POSITION)):
        return None
    value = int(digits)
    if value > MAX_POSITION:
        return None
    return value


def _positions(content: str) -> list[int]:
    positions = (_parse_position(m.group(1)) for m in POSITIONAL_PATTERN.finditer(content))
    return [pos for pos in positions if pos is not None]


def count_hint_arguments(hint: str) -> int:
    """Count ``[...]`` tokens in an argument-hint, e.g. "[pr] [priority]" -> 2."""
    if not hint:
        return 0
    return len(HINT_ARGUMENT_PATTERN.findall(hint))


def extract_required_arguments(content: str, argument_hint: str = "") -> RequiredArguments:
    """Work out how many arguments a command needs.

    ``$ARGUMENTS``/``$ARGS`` means any number (required_count -1). Otherwise
    every position up to the highest ``$N`` is required, so ``$1`` and ``$3``
    require three. The argument-hint can raise the count further.

    Args:
        content: Command body.
        argument_hint: The argument-hint from frontmatter.

    Returns:
        RequiredArguments for the command.
    """
    if ALL_ARGUMENTS_PATTERN.search(content):
        return RequiredArguments(has_all_arguments=True, required_count=-1)

    max_positional = max(_positions(content), default=0)
    hint_count = count_hint_arguments(argument_hint)

    return RequiredArguments(
        has_all_arguments=False,
        max_positional=max_positional,
        required_count=max(max_positional, hint_count),
    )


def has_all_required_arguments(content: str, required_count: int) -> bool:
    """Check that every required position is referenced in content."""
    if ALL_ARGUMENTS_PATTERN.search(content):
        return True
    if required_count <= 0:
        return True

    found = {pos for pos in _positions(content) if 1 <= pos <= required_count}
    return len(found) == required_count


def substitute_arguments(content: str, args: list[str]) -> str:
    """Replace placeholders with argument values.

    Missing positions, and ``$0``, become empty strings. Digit runs too large
    to be a position are left as written.

    Args:
        content: Command body with placeholders.
        args: Arguments supplied by the user.

    Returns:
        Content with every placeholder substituted.
    """
    joined = " ".join(args)
    result = ALL_ARGUMENTS_PATTERN.sub(lambda _: joined, content)

    def _positional(match: re.Match) -> str:
        position = _parse_position(match.group(1))
        if position is None:
            return match.group(0)
        index = position - 1
        if 0 <= index < len(args):
            return args[index]
        return ""

    return POSITIONAL_PATTERN.sub(_positional, result)


def process_command_content(content: str, args: list[str]) -> str:
    """Substitute arguments, leaving @file references in place."""
    return substitute_arguments(content, args)
