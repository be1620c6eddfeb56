"""Reading the clipboard history from GPaste."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Iterator
from itertools import islice

from clipstash.entries import ClipboardEntry, ImageEntry, TextEntry
from clipstash.gpaste import CommandError

_IMAGE_MARKER = " [Image,"


def _gpaste(*args: str) -> bytes:
    result = subprocess.run(
        ["gpaste-client", *args], capture_output=True, check=False
    )
    if result.returncode != 0:
        raise CommandError("gpaste-client", result.returncode)
    return result.stdout


def image_path(uuid: str) -> str:
    """Path of the file GPaste keeps for the image entry with this uuid."""
    raw = _gpaste("--raw", "get", uuid)
    return raw.decode("utf-8", errors="replace").strip()


def _records(data: bytes | str) -> Iterator[str]:
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    return (record for record in text.split("\0") if record)


def parse_history(
    data: bytes | str,
    limit: int,
    image_path_for: Callable[[str], str],
) -> list[ClipboardEntry]:
    """Turn NUL-separated 'uuid:content' records into clipboard entries.

    At most ``limit`` records are looked at; malformed records, empty
    contents and images whose file cannot be found are skipped.
    """
    entries: list[ClipboardEntry] = []
    for record in islice(_records(data), limit):
        uuid, colon, content = record.partition(":")
        if not colon:
            print(f"Invalid clipboard entry format: {record}", file=sys.stderr)
            continue
        if content.startswith(_IMAGE_MARKER):
            try:
                path = image_path_for(uuid)
            except OSError as error:
                print(
                    f"Error creating image entry for UUID {uuid}: {error}",
                    file=sys.stderr,
                )
                continue
            entries.append(ImageEntry(path, uuid))
        elif content:
            entries.append(TextEntry(content, uuid))
    return entries


def get_clipboard_entries(limit: int) -> list[ClipboardEntry]:
    """Fetch up to ``limit`` history records from gpaste-client."""
    data = _gpaste("history", "--zero")
    return parse_history(data, limit, image_path)