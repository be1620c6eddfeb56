"""Clipboard history entries: text snippets and images."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import PurePath

from PIL import Image

from clipstash import gpaste

_MARGIN = 10
_ROW_SPACING = 5
_ROW_TEXT_RESERVE = 200
_THUMB_MIN = 64
_THUMB_MAX = 256


class ClipboardEntry(ABC):
    """One item of the clipboard history, identified by its GPaste uuid."""

    uuid: str

    def copy_to_clipboard(self) -> None:
        """Make this entry the current clipboard content."""
        gpaste.copy_to_clipboard_by_gpaste_uuid(self.uuid)

    @abstractmethod
    def open_in_external_app(self) -> None:
        """Open the entry with the desktop's default application."""

    def contains_text(self, search_text: str) -> bool:
        """Whether the entry matches a search; entries without text never do."""
        return False

    @abstractmethod
    def summary(self) -> str:
        """Short text shown for the entry in the history list."""


def _lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def shorten_content(content: str) -> str:
    """Keep the first two lines, marking further lines with '...'."""
    lines = _lines(content)
    kept = lines[:2]
    if len(lines) > 2:
        kept.append("...")
    return "\n".join(kept)


@dataclass
class TextEntry(ClipboardEntry):
    """A text snippet from the clipboard history."""

    full_content: str
    uuid: str
    shorten_content: str = field(init=False)

    def __post_init__(self) -> None:
        self.shorten_content = shorten_content(self.full_content)

    def copy_to_clipboard(self) -> None:
        gpaste.copy_to_clipboard_by_gpaste_uuid(self.uuid)

    def open_in_external_app(self) -> None:
        path = gpaste.save_to_tmp_file(self.full_content)
        gpaste.open_in_external_app(path)

    def contains_text(self, search_text: str) -> bool:
        return search_text in self.full_content

    def summary(self) -> str:
        return self.shorten_content


def format_file_size(size: int) -> str:
    """Human-readable size in B, KB or MB."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024.0:.1f} KB"
    return f"{size / (1024.0 * 1024.0):.1f} MB"


def thumbnail_size(width: int, height: int, row_width: int) -> tuple[int, int]:
    """Size of an image thumbnail in a history row, keeping the aspect ratio."""
    available = row_width - _MARGIN * 2 - _ROW_SPACING - _ROW_TEXT_RESERVE
    max_size = min(max(available, _THUMB_MIN), _THUMB_MAX)
    scale = max_size / width if width > height else max_size / height
    return int(width * scale), int(height * scale)


def fit_size(
    width: int, height: int, box_width: int, box_height: int
) -> tuple[int, int]:
    """Largest size with the image's aspect ratio that fits the detail box."""
    available_width = box_width - _MARGIN * 2
    available_height = box_height - _MARGIN * 2
    scale = min(available_width / width, available_height / height)
    return int(width * scale), int(height * scale)


@dataclass
class ImageEntry(ClipboardEntry):
    """An image from the clipboard history, stored by GPaste as a file."""

    path: str
    uuid: str

    def copy_to_clipboard(self) -> None:
        gpaste.copy_to_clipboard_by_gpaste_uuid(self.uuid)

    def open_in_external_app(self) -> None:
        gpaste.open_in_external_app(self.path)

    def dimensions(self) -> tuple[int, int] | None:
        """Pixel width and height, or None when the file cannot be read."""
        try:
            with Image.open(self.path) as image:
                return image.size
        except (OSError, ValueError, Image.DecompressionBombError):
            return None

    def file_size_label(self) -> str:
        try:
            size = os.stat(self.path).st_size
        except OSError:
            return "Unknown size"
        return format_file_size(size)

    def extension_label(self) -> str:
        name = PurePath(self.path).name
        dot = name.rfind(".")
        extension = "unknown" if name == ".." or dot <= 0 else name[dot + 1 :]
        return f".{extension.upper()}"

    def dimensions_label(self) -> str:
        dims = self.dimensions()
        if dims is None:
            return "Unknown dimensions"
        return f"{dims[0]}×{dims[1]} px"

    def summary(self) -> str:
        return "\n".join(
            (self.file_size_label(), self.dimensions_label(), self.extension_label())
        )