"""
Platform specific capabilities used at the edges of the CLI.

- Where the preset table lives when no path is given on the command line
- Whether the process should wait for a keypress before exiting on error

Nothing in ``cbct_preset_selector.core`` depends on this module.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import typer

from cbct_preset_selector import APP_NAME
from cbct_preset_selector.core.errors import AppError, Result


def local_data_dir(app_name: str = APP_NAME) -> Path:
    """
    Per-user local data directory for ``app_name``.

    - Windows: %LOCALAPPDATA%\\<app_name>
    - macOS: ~/Library/Application Support/<app_name>
    - Linux: $XDG_DATA_HOME/<app_name> (default ~/.local/share/<app_name>)
    """
    if sys.platform.startswith("win") or sys.platform == "darwin":
        return Path(typer.get_app_dir(app_name, roaming=False))

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base / app_name


def default_pause_on_exit() -> bool:
    """Console windows on Windows close on exit, so wait there by default."""
    return sys.platform.startswith("win")


def ensure_data_dir(data_dir: Path) -> Result[bool]:
    """
    Create ``data_dir`` if missing.

    Returns
    -------
    Result[bool]
        True when the directory was created, False when it already existed
    """
    if data_dir.is_dir():
        return Result.ok(False)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Result.fail(AppError.io(
            f"Unable to create missing directory {data_dir} [error message: {e}]"
        ))
    return Result.ok(True)


def pause(console, stream=None) -> None:
    """Show the keypress notice and wait for a line of input."""
    console.print("Press any key to continue ...", end="", markup=False)
    try:
        if stream is None:
            console.input()
        else:
            stream.readline()
    except (EOFError, OSError):
        pass
