"""The shell's built-in commands: echo and exit."""

from __future__ import annotations

import sys
from typing import NoReturn, TextIO

from minishell.textutils import atoi, is_numeric, split_words


class ShellExit(Exception):
    """Raised when the shell is asked to terminate with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def echo(line: str, out: TextIO | None = None) -> None:
    """Print everything after the first four characters of ``line``."""
    stream = sys.stdout if out is None else out
    stream.write(line[4:] + "\n")


def exit_builtin(line: str, out: TextIO | None = None) -> NoReturn:
    """Announce the exit and raise ShellExit with the requested status.

    More than one argument gives status 1, a non-numeric argument 255;
    otherwise the argument (as a process exit status) or 0.
    """
    stream = sys.stdout if out is None else out
    args = split_words(line, " ")
    stream.write("exit\n")
    if len(args) > 2:
        stream.write("minishell: exit: too many arguments\n")
        raise ShellExit(1)
    if len(args) == 2 and not is_numeric(args[1]):
        stream.write(f"minishell: exit: {args[1]} : numeric argument required\n")
        raise ShellExit(255)
    if len(args) == 2:
        raise ShellExit(atoi(args[1]) % 256)
    raise ShellExit(0)