# minishell

A small interactive shell. It shows a coloured prompt with your user name and
reads lines one at a time. Each line is either a builtin or the name of a
program, which is looked up on `PATH`.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt shows the value of the `USER` environment variable in green,
followed by `$ `. Line editing and history come from Python's `readline`
module when it is available. End of input (Ctrl-D) leaves the shell with
status 0.

### Builtins

A line is treated as a builtin when its first word begins with `echo` or
`exit`.

- `echo TEXT` prints everything after the first four characters of the line,
  followed by a newline. So `echo hello` prints ` hello`, keeping the space.
- `exit [N]` prints `exit` and leaves the shell.
  - With no argument the status is 0.
  - With one argument made only of the digits 0-9, that number modulo 256 is
    the status.
  - Any other single argument, including a signed number such as `-1`, prints
    `minishell: exit: ARG : numeric argument required` and leaves with
    status 255.
  - More than one argument prints `minishell: exit: too many arguments` and
    leaves with status 1.

### Other commands

Any other line is split on spaces, with runs of spaces counting as one. The
first word is searched for in each directory on `PATH`, and the first
executable `DIR/NAME` found runs with the remaining words as its arguments.
The shell waits for it to finish. When nothing is found the shell prints
`command not found: NAME` to standard error. Empty lines do nothing.

### What it does not do

Words are split on spaces only. There is no quoting, escaping, variable
expansion, globbing, pipes, redirection, background jobs or signal handling,
and no builtins besides `echo` and `exit` (there is no `cd`). A command name
containing `/` is still looked up under each `PATH` directory rather than run
directly.

## Using it from Python

```python
from minishell.shell import Shell

shell = Shell(env={"PATH": "/bin:/usr/bin", "USER": "demo"})
shell.handle_line("echo hello")   # writes " hello\n" to shell.stdout
status = shell.execute("true")    # exit status of the program, or None
print(shell.history)              # lines passed to handle_line
```

- `Shell(env=None, stdout=None, stderr=None)` takes the environment (default:
  `os.environ`) and the output streams (default: `sys.stdout` and
  `sys.stderr`). Programs write straight to the streams when they have a file
  descriptor; otherwise their output is captured and written to them.
- `Shell.run_builtin(line)` runs a builtin and returns `True`, or returns
  `False` when the line is not one.
- `Shell.execute(line)` runs a program found on `PATH` and returns its exit
  status, or `None` for an empty line or an unknown command.
- `Shell.handle_line(line)` does either and records the line in
  `Shell.history`.
- `Shell.repl(read_line)` calls `read_line(prompt)` until it raises
  `EOFError` (returns 0) or `exit` is used (returns its status).
- `exit` raises `minishell.builtins.ShellExit`, whose `status` attribute holds
  the requested status.

Other modules:

- `minishell.paths`: `get_path(env)`, `find_command(env, command)` (raises
  `ValueError` for an empty name) and `prompt_name(user=None)`.
- `minishell.textutils`: string helpers such as `split_words`, `atoi`
  (C-style, wrapping like a 32-bit integer), `strncmp`, `trim`, `substr`,
  `find_within`, `is_ascii_digit` and `is_numeric`.
- `minishell.printf`: `format_printf(fmt, *args)` renders the
  `%c %s %d %i %u %x %X %p %%` conversions and returns the text;
  `print_formatted(fmt, *args, file=None)` writes it and returns the number
  of characters written. Unknown conversions produce nothing, and too few
  arguments raise `TypeError`.

## Tests

```
pip install .[test]
pytest
```