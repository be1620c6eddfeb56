"""Thin helpers around the gpaste-client and xdg-open commands."""

from __future__ import annotations

import subprocess
import tempfile


class CommandError(OSError):
    """An external command ran but exited unsuccessfully."""

    def __init__(self, program: str, returncode: int) -> None:
        self.program = program
        self.returncode = returncode
        super().__init__(
            f"{program} command failed with status: {_describe_status(returncode)}"
        )


def _describe_status(returncode: int) -> str:
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"


def _run(program: str, *args: str) -> bytes:
    """Run a command, returning its standard output or raising CommandError."""
    result = subprocess.run([program, *args], capture_output=True, check=False)
    if result.returncode != 0:
        raise CommandError(program, result.returncode)
    return result.stdout


def copy_to_clipboard_by_gpaste_uuid(uuid: str) -> None:
    """Make the GPaste history item with this uuid the current clipboard content."""
    _run("gpaste-client", "select", uuid)


def save_to_tmp_file(content: str) -> str:
    """Write text to a new temporary file that outlives this call; return its path."""
    with tempfile.NamedTemporaryFile(
        mode="w", encoding="utf-8", delete=False
    ) as handle:
        handle.write(content)
        handle.flush()
        return handle.name


def open_in_external_app(file_path: str) -> None:
    """Open a file with the desktop's default application."""
    _run("xdg-open", file_path)