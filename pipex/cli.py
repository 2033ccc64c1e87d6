"""Run ``infile cmd1 cmd2 outfile`` as ``< infile cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.command import CommandNotFoundError, resolve_command

EXIT_FAILURE = 1
COMMAND_NOT_FOUND = 127
_USAGE = "Args error.\nUsage: pipex infile cmd1 cmd2 outfile"


def _report(prefix: str, error: OSError) -> None:
    print(f"{prefix}: {error.strerror or error}", file=sys.stderr)


def exit_status(returncode: int) -> int:
    """Turn a subprocess return code into a shell-style exit status.

    A process killed by signal N reports 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def _start(
    cmd: str, env: Mapping[str, str], stdin_fd: int, stdout_fd: int
) -> subprocess.Popen | int:
    """Start ``cmd`` wired to the given descriptors, or return a failure status."""
    try:
        path, args = resolve_command(cmd, env)
    except CommandNotFoundError as error:
        print(f"pipex: {error}", file=sys.stderr)
        return COMMAND_NOT_FOUND
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin_fd, stdout=stdout_fd, env=dict(env)
        )
    except OSError as error:
        _report("execve failed", error)
        return EXIT_FAILURE


def _wait(stage: subprocess.Popen | int) -> int:
    if isinstance(stage, int):
        return stage
    return exit_status(stage.wait())


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Pipe ``cmd1`` reading ``infile`` into ``cmd2`` writing ``outfile``.

    Returns the exit status of the second command.
    """
    environment = os.environ if env is None else env
    read_fd, write_fd = os.pipe()
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as error:
            _report("open filein", error)
            first: subprocess.Popen | int = EXIT_FAILURE
        else:
            try:
                first = _start(cmd1, environment, in_fd, write_fd)
            finally:
                os.close(in_fd)
        os.close(write_fd)
        write_fd = -1

        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        except OSError as error:
            _report("open fileout", error)
            second: subprocess.Popen | int = EXIT_FAILURE
        else:
            try:
                second = _start(cmd2, environment, read_fd, out_fd)
            finally:
                os.close(out_fd)
        os.close(read_fd)
        read_fd = -1
    finally:
        for fd in (read_fd, write_fd):
            if fd >= 0:
                os.close(fd)

    _wait(first)
    return _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(_USAGE, file=sys.stderr)
        return EXIT_FAILURE
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile)
    except OSError as error:
        _report("Pipe error", error)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())