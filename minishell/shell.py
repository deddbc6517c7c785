"""The interactive shell: built-ins, command execution and the prompt loop."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from collections.abc import Callable, Mapping
from typing import TextIO

from minishell.builtins import ShellExit, echo, exit_builtin
from minishell.paths import find_command, prompt_name
from minishell.textutils import split_words, strncmp


def _file_descriptor(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return None


class Shell:
    """A minimal shell running built-ins or programs found on PATH."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.env = dict(os.environ if env is None else env)
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.history: list[str] = []

    def run_builtin(self, line: str) -> bool:
        """Run ``line`` if it names a built-in; tell whether it did."""
        args = split_words(line, " ")
        if not args:
            return False
        if strncmp(args[0], "echo", 4) == 0:
            echo(line, self.stdout)
            return True
        if strncmp(args[0], "exit", 4) == 0:
            exit_builtin(line, self.stdout)
        return False

    def _not_found(self, name: str) -> None:
        self.stderr.write(f"command not found: {name}\n")

    def execute(self, line: str) -> int | None:
        """Run the program named by ``line`` and wait for it.

        Returns its exit status, or None when the line is empty or the
        program cannot be found on PATH.
        """
        args = split_words(line, " ")
        if not args:
            return None
        path = find_command(self.env, args[0])
        if path is None:
            self._not_found(args[0])
            return None
        out_fd = _file_descriptor(self.stdout)
        err_fd = _file_descriptor(self.stderr)
        self.stdout.flush()
        self.stderr.flush()
        try:
            completed = subprocess.run(
                args,
                executable=path,
                env=self.env,
                stdout=out_fd if out_fd is not None else subprocess.PIPE,
                stderr=err_fd if err_fd is not None else subprocess.PIPE,
                check=False,
            )
        except OSError:
            self._not_found(args[0])
            return 1
        if out_fd is None and completed.stdout:
            self.stdout.write(completed.stdout.decode(errors="replace"))
        if err_fd is None and completed.stderr:
            self.stderr.write(completed.stderr.decode(errors="replace"))
        return completed.returncode

    def handle_line(self, line: str) -> None:
        """Run one input line and record it in the history."""
        if not self.run_builtin(line):
            self.execute(line)
        self.history.append(line)

    def repl(self, read_line: Callable[[str], str]) -> int:
        """Read and run lines until exit or end of input; return the status."""
        while True:
            prompt = prompt_name(self.env.get("USER", ""))
            try:
                line = read_line(prompt)
            except EOFError:
                return 0
            try:
                self.handle_line(line)
            except ShellExit as request:
                return request.status


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the terminal."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    return Shell().repl(input)


if __name__ == "__main__":
    raise SystemExit(main())