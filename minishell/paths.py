"""Command lookup on PATH and the prompt text."""

from __future__ import annotations

import os
from collections.abc import Mapping

from minishell.textutils import split_words

_PROMPT_START = "\001\033[1;32m\002"
_PROMPT_END = "\033[0m\002$ "


def get_path(env: Mapping[str, str]) -> str | None:
    """Return the value of PATH in ``env``, or None when it is not set."""
    return env.get("PATH")


def find_command(env: Mapping[str, str], command: str) -> str | None:
    """Return the first executable ``<dir>/<command>`` found along PATH.

    Raises ValueError for an empty command. Returns None when PATH is unset
    or no directory holds an executable of that name.
    """
    if not command:
        raise ValueError("command must not be empty")
    search = get_path(env)
    if search is None:
        return None
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def prompt_name(user: str | None = None) -> str:
    """Build the coloured prompt for ``user`` (the USER variable by default)."""
    if user is None:
        user = os.environ.get("USER", "")
    return f"{_PROMPT_START}{user}{_PROMPT_END}"