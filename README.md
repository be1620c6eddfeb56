# clipstash

A small, keyboard-driven window for picking an item out of your GPaste
clipboard history. It lists the most recent entries, lets you preview text
and images, and makes your choice the current clipboard content again.

## Requirements

- GPaste running, with the `gpaste-client` command on your `PATH`.
- `xdg-open` for opening entries in an external application.
- Python 3.10 or later with Tk support (`tkinter`); the window is drawn
  with Tk.
- Pillow, installed automatically, for reading image entries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

Start the picker:

```
clipstash
```

The same window can be started with `python -m clipstash.app`. The command
takes no options besides `--help`.

It is most convenient bound to a global shortcut (for example Ctrl+Alt+V)
in GNOME's keyboard settings, with `clipstash` as the command.

The window is undecorated. It first lists the 10 most recent history
entries, with the first one selected. Moving down past the last one fetches
the history again, up to 100 entries, once.

In the list, a text entry is shown by its first two lines, followed by
`...` when there are more. An image entry is shown by its file size, pixel
dimensions and file extension (for example `12.3 KB  640×480 px  .PNG`).

### Keys

| Key              | Action                                                     |
|------------------|------------------------------------------------------------|
| `j`              | Move down (fetches the longer history at the end)          |
| `k`              | Move up                                                    |
| `i`              | Cycle the detail pane: hidden → normal → big → hidden      |
| `e`, `o`         | Open the selected entry in its default application         |
| `Return`, `y`    | Copy the selected entry to the clipboard and close         |
| `Escape`, `q`    | Close without copying                                      |
| `Ctrl+c`         | Close without copying                                      |

The detail pane is 500×400 pixels in its normal size and 1000×800 in its
big size. It shows the full text of a text entry, or the image scaled to fit
the pane.

Text entries are written to a temporary file (which is left in place)
before being opened with `xdg-open`; image entries are opened from the file
GPaste keeps for them.

If the history is empty or `gpaste-client` fails, the window shows an error
message instead; any key then closes it. Failures while copying or opening
an entry are reported on standard error.

## Using it as a library

- `clipstash.history.get_clipboard_entries(limit)` runs
  `gpaste-client history --zero` and returns up to `limit` entries.
  `parse_history(data, limit, image_path_for)` does the parsing on its own:
  records are `uuid:content` separated by NUL bytes; records whose content
  starts with ` [Image,` become `ImageEntry` objects (their file path is
  looked up with `image_path_for`, by default `gpaste-client --raw get`),
  other non-empty contents become `TextEntry` objects, and malformed or
  empty records are skipped.
- `clipstash.entries` holds `TextEntry` and `ImageEntry`, each with
  `copy_to_clipboard()`, `open_in_external_app()` and `summary()`, plus the
  helpers `shorten_content`, `format_file_size`, `thumbnail_size` and
  `fit_size`.
- `clipstash.gpaste` wraps the external commands; a command that exits
  unsuccessfully raises `CommandError`, a subclass of `OSError`.
- `clipstash.app.ClipboardWindow` holds the window's behaviour
  (`handle_key`, `move_down`, `move_up`, `toggle_detail`, `copy_and_close`,
  `open_selected`) apart from any drawing; pass it a `fetch_entries`
  callable to use another history source.

## What it does not do

- There is no search: the entry field at the bottom of the window only
  shows a placeholder, and `s` is not bound to anything.
- It does not set up a global keyboard shortcut for you; add one in your
  desktop settings.
- It does not install or start GPaste, and keeps no history of its own.