"""Custom exceptions for slash commands."""


class SlashCommandError(Exception):
    """Base exception for slash commands."""

    pass


class CommandLoadError(SlashCommandError):
    """Commands could not be loaded from a source, or from any source."""

    def __init__(self, message: str, errors: list[Exception] | None = None):
        super().__init__(message)
        self.errors = errors or []


class CommandNotFoundError(SlashCommandError):
    """No command is registered under the requested name."""

    def __init__(self, name: str, suggestions: list[str] | None = None, message: str | None = None):
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(message or f"command not found: {name}")


class ArgumentValidationError(SlashCommandError):
    """Supplied arguments do not satisfy the command."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class FileReadError(SlashCommandError):
    """A referenced file could not be read."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_DIRECTORY = "is_directory"
    ACCESS = "access"
    READ = "read"

    _MESSAGES = {
        NOT_FOUND: "file not found: {path}",
        PERMISSION_DENIED: "permission denied reading file: {path}",
        IS_DIRECTORY: "path is a directory, not a file: {path}",
        ACCESS: "cannot access file: {path}",
        READ: "error reading file: {path}",
    }

    def __init__(self, path: str, kind: str):
        self.path = path
        self.kind = kind
        template = self._MESSAGES.get(kind, "unknown error reading file: {path}")
        super().__init__(template.format(path=path))


class FileReferenceError(SlashCommandError):
    """One or more referenced files failed to read; nothing was sent."""

    def __init__(self, paths: list[str]):
        self.paths = list(paths)
        if len(self.paths) == 1:
            message = f"failed to read referenced file: {self.paths[0]}"
        else:
            message = f"failed to read referenced file(s): {', '.join(self.paths)}"
        super().__init__(message)


class CommandExecutionError(SlashCommandError):
    """The agent failed to run a command."""

    pass


class HelpMessageError(SlashCommandError):
    """The help message could not be created."""

    pass
