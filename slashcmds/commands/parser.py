"""Parse slash command input into a name and arguments."""

COMMAND_PREFIX = "\\"


def parse_command_input(text: str) -> tuple[str, list[str]]:
    r"""Parse ``\name arg1 "quoted arg" arg3`` into name and arguments.

    Returns ("", []) when the text is not a command (no leading backslash).

    Examples:
        ``\review-pr 123 "high priority"`` -> ("review-pr", ["123", "high priority"])
        ``\frontend:review-pr`` -> ("frontend:review-pr", [])
    """
    text = text.strip()
    if not text.startswith(COMMAND_PREFIX):
        return "", []

    parts = parse_arguments(text[len(COMMAND_PREFIX):])
    if not parts:
        return "", []

    return parts[0], parts[1:]


def parse_arguments(text: str) -> list[str]:
    """Split text on whitespace, honouring single and double quotes.

    Inside quotes a backslash escapes the active quote or another backslash.
    An empty quoted argument is kept; an unterminated quote keeps what was read.
    """
    args: list[str] = []
    current: list[str] = []
    quote = ""

    text = text.strip()
    i = 0
    while i < len(text):
        char = text[i]

        if not quote and char in ("'", '"'):
            quote = char
        elif quote and char == quote:
            quote = ""
            args.append("".join(current))
            current = []
        elif quote and char == "\\" and i + 1 < len(text):
            following = text[i + 1]
            if following in (quote, "\\"):
                current.append(following)
                i += 1
            else:
                current.append(char)
        elif not quote and char.isspace():
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(char)
        i += 1

    if current or quote:
        args.append("".join(current))

    return args
