"""Locate the executable for a command line the way a shell searches PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.strings import split_words

_BLANKS = frozenset(" \b\t\n\v\f\r")


class CommandNotFoundError(LookupError):
    """Raised when a command is empty or cannot be found on PATH."""


def is_empty_command(cmd: str) -> bool:
    """Return True when ``cmd`` holds nothing but blank characters."""
    return all(char in _BLANKS for char in cmd)


def path_from_env(env: Mapping[str, str]) -> str | None:
    """Return the PATH entry of ``env``, or None when it has none."""
    return env.get("PATH")


def find_command_path(cmd: str, env: Mapping[str, str]) -> str | None:
    """Return the executable that ``cmd`` names, or None.

    Nothing is found without a PATH in ``env``. A name starting with ``/``
    or ``.`` is used as it stands; any other name is looked up in each PATH
    directory in turn.
    """
    search_path = path_from_env(env)
    if search_path is None:
        return None
    if cmd[:1] in ("/", "."):
        return cmd if os.access(cmd, os.X_OK) else None
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(cmd: str | None, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split ``cmd`` on spaces and find its executable.

    Returns the executable path and the argument list. Raises
    CommandNotFoundError when the command is blank or cannot be found.
    """
    if cmd is None or is_empty_command(cmd):
        raise CommandNotFoundError('command not found: ""')
    args = split_words(cmd, " ")
    path = find_command_path(args[0], env)
    if path is None:
        raise CommandNotFoundError("command not found")
    return path, args