"""The clipboard history window: its behaviour and a Tk front end."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from clipstash.constants import (
    APP_HEIGHT,
    ENTRIES_WIDTH,
    INFO_BOX_WIDTH,
    INITIAL_ENTRIES,
)
from clipstash.entries import ClipboardEntry, ImageEntry, TextEntry, fit_size
from clipstash.history import get_clipboard_entries
from clipstash.keyboard import KeyAction, resolve_key
from clipstash.state import AppState, DetailsVisibility

_ALL_ENTRIES = 100
_TITLE = "Clipboard Manager"
_SEARCH_PLACEHOLDER = "Press 's' to search..."


class ClipboardWindow:
    """Keyboard-driven picker over the clipboard history.

    The window keeps its own state (list, selection, detail pane, error)
    and leaves drawing to whoever observes it through ``on_change``.
    """

    def __init__(
        self,
        fetch_entries: Callable[[int], list[ClipboardEntry]] = get_clipboard_entries,
    ) -> None:
        self._fetch_entries = fetch_entries
        self.state = AppState()
        self.error: str | None = None
        self.closed = False
        self.detail_entry: ClipboardEntry | None = None
        self.detail_content_size: tuple[int, int] | None = None
        self.window_size: tuple[int, int] = (ENTRIES_WIDTH, APP_HEIGHT)
        self.on_change: Callable[[], None] | None = None

        try:
            entries = fetch_entries(INITIAL_ENTRIES)
        except OSError as error:
            self.show_error(f"Error fetching clipboard entries: {error}")
            return
        if not entries:
            self.show_error("No clipboard entries available.")
            return
        self.populate(entries)

    @property
    def detail_size(self) -> tuple[int, int] | None:
        """Size of the detail pane, or None while it is hidden."""
        return self.state.details_visibility.detail_size()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _select(self, index: int | None) -> None:
        self.state.selected = index
        entry = self.state.selected_entry
        if self.state.details_visibility is not DetailsVisibility.HIDDEN and entry:
            self.detail_entry = entry
            self.detail_content_size = (INFO_BOX_WIDTH, APP_HEIGHT)

    def _close(self) -> None:
        self.closed = True

    def populate(self, entries: Sequence[ClipboardEntry]) -> None:
        """Replace the listed entries and select the first one."""
        self.state.entries = list(entries)
        self._select(0 if self.state.entries else None)
        self._changed()

    def _load_all_entries(self) -> bool:
        try:
            entries = self._fetch_entries(_ALL_ENTRIES)
        except OSError as error:
            self.show_error(f"Error fetching clipboard entries: {error}")
            return False
        if not entries:
            self.show_error("No more clipboard entries available.")
            return False
        self.populate(entries)
        self.state.all_entries_loaded = True
        return True

    def move_down(self) -> bool:
        """Select the next entry, loading the longer history at the end."""
        selected = self.state.selected
        if selected is None:
            return True
        next_index = selected + 1
        if next_index >= len(self.state.entries) and not self.state.all_entries_loaded:
            if not self._load_all_entries():
                return True
        if next_index < len(self.state.entries):
            self._select(next_index)
        self._changed()
        return True

    def move_up(self) -> bool:
        """Select the previous entry, if there is one."""
        selected = self.state.selected
        if selected is not None and selected > 0:
            self._select(selected - 1)
            self._changed()
        return True

    def toggle_detail(self) -> bool:
        """Cycle the detail pane through hidden, normal and big."""
        visibility = self.state.details_visibility.next()
        self.state.details_visibility = visibility
        size = visibility.detail_size()
        if size is not None:
            entry = self.state.selected_entry
            if entry is not None:
                self.detail_entry = entry
                self.detail_content_size = size
        else:
            self.window_size = (ENTRIES_WIDTH, APP_HEIGHT)
        self._changed()
        return True

    def copy_and_close(self) -> bool:
        """Put the selected entry on the clipboard and close the window."""
        entry = self.state.selected_entry
        if entry is not None:
            try:
                entry.copy_to_clipboard()
            except OSError as error:
                print(f"Error copying to clipboard: {error}", file=sys.stderr)
        self._close()
        self._changed()
        return True

    def open_selected(self) -> bool:
        """Open the selected entry with the desktop's default application."""
        entry = self.state.selected_entry
        if entry is not None:
            try:
                entry.open_in_external_app()
            except OSError as error:
                print(f"Error opening in external app: {error}", file=sys.stderr)
        return True

    def show_error(self, message: str) -> None:
        """Replace the window's content with a message; any key then closes."""
        self.error = message
        self._changed()

    def handle_key(self, keyname: str, control: bool) -> bool:
        """React to a key press; return whether the key was handled."""
        if self.error is not None:
            self._close()
            self._changed()
            return True
        action = resolve_key(keyname, control)
        if action is None:
            return False
        if action is KeyAction.CLOSE:
            self._close()
            self._changed()
            return True
        handlers = {
            KeyAction.MOVE_DOWN: self.move_down,
            KeyAction.MOVE_UP: self.move_up,
            KeyAction.TOGGLE_DETAIL: self.toggle_detail,
            KeyAction.OPEN_EXTERNAL: self.open_selected,
            KeyAction.COPY_AND_CLOSE: self.copy_and_close,
        }
        return handlers[action]()


class _TkView:
    """Draws a ClipboardWindow with Tk and feeds it key presses."""

    _CONTROL_MASK = 0x4

    def __init__(self, tk, window: ClipboardWindow) -> None:
        self._tk = tk
        self._window = window
        self._root = tk.Tk()
        self._root.title(_TITLE)
        self._root.overrideredirect(True)
        self._images: list[object] = []
        self._root.bind_all("<Key>", self._on_key)
        window.on_change = self.render
        self.render()
        self._root.focus_force()

    def run(self) -> None:
        if not self._window.closed:
            self._root.mainloop()

    def _on_key(self, event) -> str | None:
        control = bool(event.state & self._CONTROL_MASK)
        handled = self._window.handle_key(event.keysym, control)
        return "break" if handled else None

    def _clear(self) -> None:
        for child in self._root.winfo_children():
            child.destroy()
        self._images.clear()

    def render(self) -> None:
        tk = self._tk
        window = self._window
        if window.closed:
            self._root.destroy()
            return
        self._clear()
        if window.error is not None:
            tk.Label(self._root, text=window.error, padx=10, pady=10).pack()
            return

        main = tk.Frame(self._root)
        main.pack(fill="both", expand=True)

        list_frame = tk.Frame(main, width=ENTRIES_WIDTH, height=APP_HEIGHT)
        list_frame.pack_propagate(False)
        list_frame.pack(side="left", fill="y")
        listbox = tk.Listbox(list_frame, activestyle="none", takefocus=0)
        for entry in window.state.entries:
            listbox.insert("end", "  ".join(entry.summary().splitlines()))
        listbox.pack(fill="both", expand=True)
        if window.state.selected is not None:
            listbox.selection_set(window.state.selected)
            listbox.see(window.state.selected)

        pane = window.detail_size
        if pane is not None:
            detail = tk.Frame(main, width=pane[0], height=pane[1])
            detail.pack_propagate(False)
            detail.pack(side="left", fill="both", expand=True)
            self._render_detail(detail)
            self._root.geometry(f"{ENTRIES_WIDTH + pane[0]}x{max(APP_HEIGHT, pane[1])}")
        else:
            width, height = window.window_size
            self._root.geometry(f"{width}x{height}")

        search = tk.Entry(self._root, fg="grey", takefocus=0)
        search.insert(0, _SEARCH_PLACEHOLDER)
        search.pack(fill="x")

    def _render_detail(self, parent) -> None:
        tk = self._tk
        entry = self._window.detail_entry
        size = self._window.detail_content_size
        if entry is None or size is None:
            return
        if isinstance(entry, ImageEntry):
            photo = self._load_image(entry, size)
            if photo is None:
                tk.Label(parent, text="image-missing").pack(pady=10)
            else:
                self._images.append(photo)
                tk.Label(parent, image=photo).pack(pady=10, expand=True)
            return
        text = entry.full_content if isinstance(entry, TextEntry) else entry.summary()
        widget = tk.Text(parent, wrap="none", takefocus=0, padx=10, pady=8)
        widget.insert("1.0", text)
        widget.configure(state="disabled")
        widget.pack(fill="both", expand=True)

    @staticmethod
    def _load_image(entry: ImageEntry, size: tuple[int, int]):
        from PIL import Image, ImageTk

        try:
            with Image.open(entry.path) as image:
                width, height = fit_size(image.width, image.height, *size)
                scaled = image.resize((max(width, 1), max(height, 1)))
                return ImageTk.PhotoImage(scaled)
        except (OSError, ValueError, Image.DecompressionBombError):
            return None


def main(argv: Sequence[str] | None = None) -> int:
    """Show the clipboard history window."""
    parser = argparse.ArgumentParser(
        prog="clipstash", description="Pick an entry from the GPaste clipboard history."
    )
    parser.parse_args(argv)

    import tkinter

    window = ClipboardWindow()
    view = _TkView(tkinter, window)
    view.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())