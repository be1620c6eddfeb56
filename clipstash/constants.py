"""Window and layout sizes shared by the clipboard window."""

APP_HEIGHT = 400
ENTRIES_WIDTH = 500
INFO_BOX_WIDTH = 500
INFO_BOX_BIG_WIDTH = 1000
INFO_BOX_BIG_HEIGHT = 800
INITIAL_ENTRIES = 10