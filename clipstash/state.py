"""State shared by the clipboard window's event handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from clipstash.constants import (
    APP_HEIGHT,
    INFO_BOX_BIG_HEIGHT,
    INFO_BOX_BIG_WIDTH,
    INFO_BOX_WIDTH,
)
from clipstash.entries import ClipboardEntry


class DetailsVisibility(Enum):
    """How the detail pane beside the history list is shown."""

    HIDDEN = "hidden"
    NORMAL = "normal"
    BIG = "big"

    def next(self) -> DetailsVisibility:
        """The state a detail toggle moves to: hidden, normal, big, hidden."""
        order = (DetailsVisibility.HIDDEN, DetailsVisibility.NORMAL, DetailsVisibility.BIG)
        return order[(order.index(self) + 1) % len(order)]

    def detail_size(self) -> tuple[int, int] | None:
        """Width and height of the detail pane, or None when hidden."""
        if self is DetailsVisibility.BIG:
            return INFO_BOX_BIG_WIDTH, INFO_BOX_BIG_HEIGHT
        if self is DetailsVisibility.NORMAL:
            return INFO_BOX_WIDTH, APP_HEIGHT
        return None


@dataclass
class AppState:
    """Entries shown in the list, the selection and the detail pane's mode."""

    entries: list[ClipboardEntry] = field(default_factory=list)
    selected: int | None = None
    details_visibility: DetailsVisibility = DetailsVisibility.HIDDEN
    all_entries_loaded: bool = False

    @property
    def selected_entry(self) -> ClipboardEntry | None:
        """The entry of the selected row, if any."""
        if self.selected is None or not 0 <= self.selected < len(self.entries):
            return None
        return self.entries[self.selected]