import io

import pytest

from minishell.builtins import ShellExit
from minishell.shell import Shell


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def bin_dir(tmp_path):
    _script(tmp_path, "tool", 'echo ran "$@"\n')
    _script(tmp_path, "fail", "exit 7\n")
    _script(tmp_path, "showenv", 'echo "$FOO"\n')
    _script(tmp_path, "complain", 'echo oops >&2\n')
    return tmp_path


def _shell(bin_dir, **extra):
    env = {"PATH": str(bin_dir), "USER": "alice", **extra}
    return Shell(env, io.StringIO(), io.StringIO())


def test_builtin_echo(bin_dir):
    shell = _shell(bin_dir)
    assert shell.run_builtin("echo hi") is True
    assert shell.stdout.getvalue() == " hi\n"


def test_non_builtin_is_rejected(bin_dir):
    shell = _shell(bin_dir)
    assert shell.run_builtin("tool x") is False
    assert shell.stdout.getvalue() == ""


def test_empty_line_is_not_builtin(bin_dir):
    assert _shell(bin_dir).run_builtin("   ") is False


def test_builtin_exit_raises(bin_dir):
    shell = _shell(bin_dir)
    with pytest.raises(ShellExit) as info:
        shell.run_builtin("exit 3")
    assert info.value.status == 3


def test_execute_runs_program_with_arguments(bin_dir):
    shell = _shell(bin_dir)
    assert shell.execute("tool a  b") == 0
    assert shell.stdout.getvalue() == "ran a b\n"


def test_execute_returns_exit_status(bin_dir):
    shell = _shell(bin_dir)
    assert shell.execute("fail") == 7


def test_execute_passes_environment(bin_dir):
    shell = _shell(bin_dir, FOO="bar")
    shell.execute("showenv")
    assert shell.stdout.getvalue() == "bar\n"


def test_execute_forwards_stderr(bin_dir):
    shell = _shell(bin_dir)
    shell.execute("complain")
    assert shell.stderr.getvalue() == "oops\n"


def test_execute_unknown_command(bin_dir):
    shell = _shell(bin_dir)
    assert shell.execute("nosuch arg") is None
    assert shell.stderr.getvalue() == "command not found: nosuch\n"


def test_execute_empty_line(bin_dir):
    shell = _shell(bin_dir)
    assert shell.execute("") is None
    assert shell.stderr.getvalue() == ""


def test_handle_line_records_history(bin_dir):
    shell = _shell(bin_dir)
    shell.handle_line("echo one")
    shell.handle_line("tool two")
    assert shell.history == ["echo one", "tool two"]
    assert shell.stdout.getvalue() == " one\nran two\n"


def test_repl_stops_on_exit(bin_dir):
    shell = _shell(bin_dir)
    lines = iter(["echo x", "exit 5", "echo never"])
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return next(lines)

    assert shell.repl(read_line) == 5
    assert shell.stdout.getvalue() == " x\nexit\n"
    assert all("alice" in prompt for prompt in prompts)
    assert len(prompts) == 2


def test_repl_ends_on_end_of_input(bin_dir):
    shell = _shell(bin_dir)
    lines = iter(["echo y"])

    def read_line(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    assert shell.repl(read_line) == 0
    assert shell.history == ["echo y"]