"""Build attachments from read file contents."""
import mimetypes
import os

from .models import Attachment, FileContent

SNIFF_LEN = 512
OCTET_STREAM = "application/octet-stream"
DEFAULT_MIME_TYPE = "text/plain"

# Leading-byte signatures, checked in order
SIGNATURES: list[tuple[bytes, str]] = [
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"wOFF", "font/woff"),
    (b"wOF2", "font/woff2"),
]

HTML_PREFIXES = (b"<!doctype html", b"<html", b"<head", b"<body", b"<script")

# Control bytes that mark content as binary
_BINARY_BYTES = frozenset([*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)])


def sniff_content_type(data: bytes) -> str:
    """Guess a MIME type from the first bytes of content.

    Returns application/octet-stream when nothing matches.
    """
    head = data[:SNIFF_LEN]
    if not head:
        return DEFAULT_MIME_TYPE + "; charset=utf-8"

    if head.startswith(b"\xef\xbb\xbf"):
        return "text/plain; charset=utf-8"
    if head.startswith((b"\xfe\xff", b"\xff\xfe")):
        return "text/plain; charset=utf-16"

    for signature, mime_type in SIGNATURES:
        if head.startswith(signature):
            return mime_type
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"

    lowered = head.lstrip(b" \t\r\n").lower()
    if lowered.startswith(HTML_PREFIXES):
        return "text/html; charset=utf-8"
    if lowered.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"

    if any(byte in _BINARY_BYTES for byte in head):
        return OCTET_STREAM
    return "text/plain; charset=utf-8"


def detect_mime_type(file_path: str, content: bytes) -> str:
    """Detect MIME type from content, then extension, then default to text."""
    detected = sniff_content_type(content)
    if detected != OCTET_STREAM:
        return detected

    guessed, _ = mimetypes.guess_type(file_path)
    if guessed:
        return guessed

    return DEFAULT_MIME_TYPE


def build_file_attachments(file_contents: list[FileContent]) -> list[Attachment]:
    """Create attachments, skipping failed reads and empty files."""
    attachments = []
    for file_content in file_contents:
        if not file_content.ok:
            continue
        data = file_content.data or file_content.content.encode("utf-8")
        if not data:
            continue

        attachments.append(
            Attachment(
                file_path=file_content.path,
                file_name=os.path.basename(file_content.path),
                mime_type=detect_mime_type(file_content.path, data),
                content=data,
            )
        )
    return attachments
