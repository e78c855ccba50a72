"""Commands the shell carries out itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from typing import TextIO


class ShellExit(Exception):
    """Raised when the user asks the shell to end the session."""


def _report(err: TextIO, label: str, exc: OSError) -> None:
    err.write(f"{label}: {exc.strerror or exc}\n")


def pwd(is_background: bool, out: TextIO) -> None:
    """Write the working directory, unless running in the background."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _report(sys.stderr, "pwd error", exc)
        return
    if not is_background:
        out.write(f"{cwd}\n")


def cd(path: str | None, err: TextIO) -> int:
    """Change the working directory; return 0 on success and 1 on failure."""
    try:
        os.chdir(path or "")
    except OSError as exc:
        _report(err, "cd error", exc)
        return 1
    return 0


def ls(is_background: bool, show_all: bool, directory: str, out: TextIO) -> None:
    """List the entries of a directory, hiding dot files unless show_all is set."""
    try:
        with os.scandir(directory) as entries:
            names = [".", ".."] + [entry.name for entry in entries]
    except OSError as exc:
        _report(sys.stderr, "opendir", exc)
        return
    if is_background:
        return
    for name in names:
        if show_all or not name.startswith("."):
            out.write(f"{name}\n")


def cat(is_background: bool, filename: str | None, out: TextIO, err: TextIO) -> None:
    """Write a file's contents followed by a newline."""
    if is_background:
        return
    try:
        with open(filename or "", encoding="utf-8", errors="replace") as handle:
            for chunk in iter(lambda: handle.read(65536), ""):
                out.write(chunk)
    except OSError as exc:
        _report(err, "cat error", exc)
        return
    out.write("\n")