from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from clipstash.app import ClipboardWindow
from clipstash.constants import (
    APP_HEIGHT,
    ENTRIES_WIDTH,
    INFO_BOX_WIDTH,
    INITIAL_ENTRIES,
)
from clipstash.entries import ClipboardEntry
from clipstash.gpaste import CommandError
from clipstash.state import DetailsVisibility


@dataclass(eq=False)
class FakeEntry(ClipboardEntry):
    uuid: str
    fail: bool = False
    copies: int = 0
    opens: int = 0

    def copy_to_clipboard(self) -> None:
        self.copies += 1
        if self.fail:
            raise CommandError("gpaste-client", 1)

    def open_in_external_app(self) -> None:
        self.opens += 1
        if self.fail:
            raise CommandError("xdg-open", 1)

    def summary(self) -> str:
        return self.uuid


@dataclass
class Fetcher:
    first: list
    more: list = field(default_factory=list)
    limits: list = field(default_factory=list)
    more_error: Exception | None = None

    def __call__(self, limit: int):
        self.limits.append(limit)
        if len(self.limits) == 1:
            return self.first
        if self.more_error is not None:
            raise self.more_error
        return self.more


def make(count=3, more_count=5, **kwargs):
    first = [FakeEntry(f"u{n}") for n in range(count)]
    more = [FakeEntry(f"m{n}") for n in range(more_count)]
    fetcher = Fetcher(first, more, **kwargs)
    return ClipboardWindow(fetcher), fetcher


def test_initial_load_selects_first_entry():
    window, fetcher = make()
    assert fetcher.limits == [INITIAL_ENTRIES]
    assert window.state.selected == 0
    assert window.state.selected_entry.uuid == "u0"
    assert window.error is None
    assert window.detail_size is None


def test_initial_fetch_error_is_shown():
    window = ClipboardWindow(lambda limit: (_ for _ in ()).throw(CommandError("gpaste-client", 1)))
    assert window.error == (
        "Error fetching clipboard entries: "
        "gpaste-client command failed with status: exit status: 1"
    )


def test_no_entries_is_an_error():
    window = ClipboardWindow(lambda limit: [])
    assert window.error == "No clipboard entries available."
    assert window.state.selected is None


def test_move_down_and_up():
    window, _ = make()
    assert window.move_down() is True
    assert window.state.selected == 1
    window.move_up()
    window.move_up()
    assert window.state.selected == 0


def test_move_down_at_end_loads_all_entries():
    window, fetcher = make(count=2, more_count=5)
    window.move_down()
    window.move_down()
    assert fetcher.limits == [INITIAL_ENTRIES, 100]
    assert window.state.all_entries_loaded is True
    assert [entry.uuid for entry in window.state.entries][:2] == ["m0", "m1"]
    assert window.state.selected == 2


def test_move_down_does_not_reload_once_loaded():
    window, fetcher = make(count=1, more_count=2)
    for _ in range(5):
        window.move_down()
    assert fetcher.limits == [INITIAL_ENTRIES, 100]
    assert window.state.selected == 1


def test_move_down_with_no_more_entries_shows_error():
    window, _ = make(count=1, more_count=0)
    window.move_down()
    assert window.error == "No more clipboard entries available."


def test_move_down_fetch_failure_shows_error():
    window, _ = make(count=1, more_error=CommandError("gpaste-client", 2))
    window.move_down()
    assert window.error.startswith("Error fetching clipboard entries:")


def test_toggle_detail_cycles_states():
    window, _ = make()
    window.toggle_detail()
    assert window.state.details_visibility is DetailsVisibility.NORMAL
    assert window.detail_size == DetailsVisibility.NORMAL.detail_size()
    assert window.detail_entry is window.state.selected_entry
    assert window.detail_content_size == DetailsVisibility.NORMAL.detail_size()
    window.toggle_detail()
    assert window.state.details_visibility is DetailsVisibility.BIG
    assert window.detail_content_size == DetailsVisibility.BIG.detail_size()
    window.toggle_detail()
    assert window.state.details_visibility is DetailsVisibility.HIDDEN
    assert window.detail_size is None
    assert window.window_size == (ENTRIES_WIDTH, APP_HEIGHT)


def test_selection_change_updates_visible_detail():
    window, _ = make()
    window.toggle_detail()
    window.toggle_detail()
    window.move_down()
    assert window.detail_entry.uuid == "u1"
    assert window.detail_content_size == (INFO_BOX_WIDTH, APP_HEIGHT)


def test_selection_change_leaves_hidden_detail_alone():
    window, _ = make()
    window.move_down()
    assert window.detail_entry is None


def test_copy_and_close():
    window, _ = make()
    window.move_down()
    entry = window.state.selected_entry
    assert window.copy_and_close() is True
    assert entry.copies == 1
    assert window.closed is True


def test_copy_failure_still_closes():
    entry = FakeEntry("bad", fail=True)
    window = ClipboardWindow(lambda limit: [entry])
    window.copy_and_close()
    assert entry.copies == 1
    assert window.closed is True


def test_open_selected_keeps_window_open():
    window, _ = make()
    entry = window.state.selected_entry
    window.open_selected()
    assert entry.opens == 1
    assert window.closed is False


def test_open_failure_is_swallowed():
    entry = FakeEntry("bad", fail=True)
    window = ClipboardWindow(lambda limit: [entry])
    assert window.open_selected() is True
    assert entry.opens == 1


@pytest.mark.parametrize("keyname", ["q", "Escape"])
def test_close_keys(keyname):
    window, _ = make()
    assert window.handle_key(keyname, False) is True
    assert window.closed is True


def test_control_c_closes():
    window, _ = make()
    assert window.handle_key("c", True) is True
    assert window.closed is True


def test_plain_c_is_not_handled():
    window, _ = make()
    assert window.handle_key("c", False) is False
    assert window.closed is False


def test_keys_dispatch_to_actions():
    window, _ = make()
    window.handle_key("j", False)
    assert window.state.selected == 1
    window.handle_key("k", False)
    assert window.state.selected == 0
    window.handle_key("i", False)
    assert window.state.details_visibility is DetailsVisibility.NORMAL
    entry = window.state.selected_entry
    window.handle_key("o", False)
    window.handle_key("e", False)
    assert entry.opens == 2
    window.handle_key("Return", False)
    assert entry.copies == 1
    assert window.closed is True


def test_any_key_closes_after_error():
    window = ClipboardWindow(lambda limit: [])
    assert window.handle_key("x", False) is True
    assert window.closed is True


def test_populate_replaces_entries():
    window, _ = make()
    window.move_down()
    fresh = [FakeEntry("a"), FakeEntry("b")]
    window.populate(fresh)
    assert window.state.entries == fresh
    assert window.state.selected == 0
    window.populate([])
    assert window.state.selected is None
    assert window.state.selected_entry is None


def test_on_change_is_notified():
    window, _ = make()
    calls = []
    window.on_change = lambda: calls.append(window.state.selected)
    window.move_down()
    window.show_error("boom")
    assert calls == [1, 1]
    assert window.error == "boom"