"""Test attachment building and MIME detection."""
import pytest
from slashcmds.commands.attachments import (
    build_file_attachments,
    detect_mime_type,
    sniff_content_type,
)
from slashcmds.commands.models import FileContent
from slashcmds.exceptions import FileReadError


def test_build_attachments_from_text():
    """Text files become attachments with name, type and bytes."""
    contents = [FileContent(path="/project/notes.txt", content="hello", data=b"hello")]

    attachments = build_file_attachments(contents)

    assert len(attachments) == 1
    att = attachments[0]
    assert att.file_path == "/project/notes.txt"
    assert att.file_name == "notes.txt"
    assert att.mime_type.startswith("text/plain")
    assert att.content == b"hello"


def test_build_attachments_encodes_text_without_data():
    """Content without raw bytes is encoded as UTF-8."""
    attachments = build_file_attachments([FileContent(path="/p/a.md", content="héllo")])

    assert attachments[0].content == "héllo".encode("utf-8")


def test_build_attachments_skips_failed_and_empty():
    """Failed reads and empty files produce no attachment."""
    contents = [
        FileContent(path="/p/missing.txt", error=FileReadError("/p/missing.txt", FileReadError.NOT_FOUND)),
        FileContent(path="/p/empty.txt", content="", data=b""),
        FileContent(path="/p/ok.txt", content="ok", data=b"ok"),
    ]

    attachments = build_file_attachments(contents)

    assert [a.file_name for a in attachments] == ["ok.txt"]


def test_build_attachments_empty_input():
    """No contents, no attachments."""
    assert build_file_attachments([]) == []


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"%PDF-1.7\n...", "application/pdf"),
        (b"\x89PNG\r\n\x1a\n\x00\x00", "image/png"),
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
        (b"GIF89a\x01\x00", "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"PK\x03\x04\x14\x00", "application/zip"),
        (b"  <!DOCTYPE html><html>", "text/html; charset=utf-8"),
        (b"<?xml version='1.0'?>", "text/xml; charset=utf-8"),
        (b"package main\n\nfunc main() {}\n", "text/plain; charset=utf-8"),
        (b"\x00\x01\x02\x03binary", "application/octet-stream"),
    ],
)
def test_sniff_content_type(data, expected):
    """Leading bytes identify common formats."""
    assert sniff_content_type(data) == expected


def test_detect_falls_back_to_extension():
    """Unrecognized binary content uses the file extension."""
    assert detect_mime_type("/p/archive.tar", b"\x00\x01\x02") == "application/x-tar"


def test_detect_defaults_to_text():
    """Unknown binary content with an unknown extension is text/plain."""
    assert detect_mime_type("/p/blob.unknownext", b"\x00\x01\x02") == "text/plain"


def test_detect_prefers_content_over_extension():
    """Content sniffing wins over a misleading extension."""
    assert detect_mime_type("/p/image.txt", b"\x89PNG\r\n\x1a\n") == "image/png"
