"""Resolve and read @file references in command content."""
import asyncio
import logging
import os
import re
import stat

from slashcmds.exceptions import FileReadError

from .models import FileContent

logger = logging.getLogger(__name__)

# @ followed by path characters; also matches e-mail domains, which is accepted
FILE_REF_PATTERN = re.compile(r"@([A-Za-z0-9_./\\-]+)")
LEADING_SLASHES = re.compile(r"^/{2,}")


def parse_file_references(content: str) -> list[str]:
    """Extract @file references, deduplicated, in first-seen order.

    Examples:
        "Review @a.txt and @src/b.py" -> ["a.txt", "src/b.py"]
    """
    refs: list[str] = []
    seen: set[str] = set()
    for match in FILE_REF_PATTERN.finditer(content):
        ref = match.group(1).strip()
        if ref and ref not in seen:
            seen.add(ref)
            refs.append(ref)
    return refs


def resolve_file_paths(refs: list[str], working_dir: str) -> list[str]:
    """Turn references into absolute, normalized paths.

    Backslashes are treated as separators. Absolute references are kept,
    relative ones are joined to working_dir.
    """
    resolved = []
    for ref in refs:
        cleaned = _clean_path(ref.replace("\\", "/"))
        if os.path.isabs(ref):
            resolved.append(cleaned)
        else:
            joined = os.path.join(working_dir, cleaned.lstrip("/"))
            resolved.append(_clean_path(os.path.abspath(joined)))
    return resolved


def _clean_path(path: str) -> str:
    # normpath keeps a leading "//" on POSIX
    return LEADING_SLASHES.sub("/", os.path.normpath(path))


def read_file(path: str) -> FileContent:
    """Read one file, classifying any failure.

    Returns:
        FileContent with content, or with an error and empty content.
    """
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return _failed(path, FileReadError.NOT_FOUND)
    except OSError:
        return _failed(path, FileReadError.ACCESS)

    if stat.S_ISDIR(info.st_mode):
        return _failed(path, FileReadError.IS_DIRECTORY)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except PermissionError:
        return _failed(path, FileReadError.PERMISSION_DENIED)
    except OSError:
        return _failed(path, FileReadError.READ)

    return FileContent(
        path=path, content=data.decode("utf-8", errors="replace"), data=data
    )


def _failed(path: str, kind: str) -> FileContent:
    error = FileReadError(path, kind)
    logger.warning(f"Failed to read file for command attachment: {error}")
    return FileContent(path=path, error=error)


async def read_file_contents(paths: list[str]) -> list[FileContent]:
    """Read all files concurrently, keeping input order.

    A failure in one file never stops the others.
    """
    if not paths:
        return []
    return list(
        await asyncio.gather(*(asyncio.to_thread(read_file, path) for path in paths))
    )
