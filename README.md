# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. Its output is fed to the second command, and the output of the
second command is written to an output file.

Running

    pipex infile "cmd1 args" "cmd2 args" outfile

behaves like the shell line

    < infile cmd1 args | cmd2 args > outfile

The same command is available as `python -m pipex.cli`.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Usage

    pipex input.txt "grep hello" "wc -l" output.txt

Exactly four arguments are required. With any other number, `pipex` prints

    Args error.
    Usage: pipex infile cmd1 cmd2 outfile

to standard error and exits with status 1.

Each command is split on spaces into words; runs of spaces count as one and
quoting is not supported. The first word names the program:

- If `PATH` is not set in the environment, no program is found, even one
  given by its full path.
- A name that starts with `/` or `.` is used as it stands if it is executable.
- Any other name is looked up in each directory of `PATH`, in order.
- A program that cannot be found gives `pipex: command not found` on standard
  error, and that command counts as having exited with status 127.
- An empty command, or one made only of whitespace, gives
  `pipex: command not found: ""` and status 127.

If the input file cannot be opened, `pipex` prints `open filein: <reason>`
and the first command is not started; the second command still runs with an
empty input. The output file is created if missing (mode `0777`, less the
umask) and emptied if it exists. If it cannot be opened, `pipex` prints
`open fileout: <reason>` and exits with status 1.

The exit status of `pipex` is that of the second command. A command killed by
a signal counts as 128 plus the signal number.

## Library use

The command is built from a few modules that can also be used directly.

### `pipex.cli`

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the pipeline and
  returns the second command's exit status. `env` is the environment used both
  to search `PATH` and to run the commands; it defaults to `os.environ`.
- `exit_status(returncode)` turns a `subprocess` return code into a shell-style
  status (a negative code `-N` becomes `128 + N`).
- `main(argv=None)` is the command entry point and returns the exit status.

### `pipex.command`

- `resolve_command(cmd, env)` splits a command line and returns
  `(path, args)`, or raises `CommandNotFoundError` (a `LookupError`).
- `find_command_path(cmd, env)` returns the executable path or `None`.
- `path_from_env(env)` and `is_empty_command(cmd)` are the checks it uses.

### `pipex.strings`

String helpers with C-library behaviour: `split_words`, `atoi`, `itoa`,
`strtrim`, `substr`, `strnstr` (returns an index or `None`), `strncmp`, and
`strlcpy` / `strlcat`, which return the resulting text together with the
length the full result would have had.

### `pipex.printf`

`format_printf(fmt, *args)` renders the `%c %s %d %i %u %x %X %p %%`
conversions, treating integers as 32-bit C ints; `printf(fmt, *args,
stream=None)` writes the result (to standard output by default) and returns
the number of characters written. Running out of arguments raises
`ValueError`.

### `pipex.lines`

`LineReader(stream, buffer_size=15)` reads a file object or file descriptor
in chunks of `buffer_size` and returns one line at a time from `read_line()`
(or by iteration), keeping each line's newline; `read_lines(stream,
buffer_size=15)` is a generator over the same lines.

```python
from pipex.cli import run_pipeline
from pipex.strings import split_words
from pipex.printf import format_printf
from pipex.lines import read_lines

status = run_pipeline(
    "input.txt", "grep hello", "wc -l", "output.txt",
    env={"PATH": "/usr/bin:/bin"},
)

split_words("  ls   -l  ", " ")           # ['ls', '-l']
format_printf("%d items, %x hex", 42, 255)  # '42 items, ff hex'

with open("input.txt") as fh:
    for line in read_lines(fh, 15):
        print(line, end="")
```

## What it does not do

`pipex` joins exactly two commands. It does not take longer chains of
commands, does not read input from a here-document, does not append to the
output file, and does not understand shell quoting, variables or globbing in
the command strings.