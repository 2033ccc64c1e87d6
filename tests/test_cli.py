import os
import signal

import pytest

from pipex.cli import COMMAND_NOT_FOUND, exit_status, main, run_pipeline


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def bin_env(tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _script(bin_dir, "copy", "exec cat\n")
    _script(bin_dir, "upper", "exec tr a-z A-Z\n")
    _script(bin_dir, "fail3", "cat >/dev/null\nexit 3\n")
    env = dict(os.environ)
    env["PATH"] = f"{bin_dir}:{os.environ.get('PATH', os.defpath)}"
    return env


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\n")
    return path


def test_exit_status_passes_codes_through():
    assert exit_status(0) == 0
    assert exit_status(3) == 3


def test_exit_status_for_signal():
    assert exit_status(-int(signal.SIGKILL)) == 128 + int(signal.SIGKILL)


def test_pipeline_output(tmp_path, infile, bin_env):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "copy", "upper", str(outfile), bin_env)
    assert status == 0
    assert outfile.read_text() == "HELLO\n"


def test_outfile_is_truncated(tmp_path, infile, bin_env):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old contents that are much longer\n")
    run_pipeline(str(infile), "copy", "copy", str(outfile), bin_env)
    assert outfile.read_text() == infile.read_text()


def test_status_of_second_command(tmp_path, infile, bin_env):
    outfile = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "copy", "fail3", str(outfile), bin_env) == 3


def test_first_command_status_ignored(tmp_path, infile, bin_env):
    outfile = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "fail3", "copy", str(outfile), bin_env) == 0
    assert outfile.read_text() == ""


def test_missing_infile(tmp_path, bin_env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "absent"), "copy", "copy", str(outfile), bin_env)
    assert status == 0
    assert outfile.read_text() == ""
    assert "open filein" in capsys.readouterr().err


def test_second_command_not_found(tmp_path, infile, bin_env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "copy", "no-such-cmd", str(outfile), bin_env)
    assert status == COMMAND_NOT_FOUND
    assert "pipex: command not found" in capsys.readouterr().err


def test_empty_second_command(tmp_path, infile, bin_env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "copy", "   ", str(outfile), bin_env)
    assert status == COMMAND_NOT_FOUND
    assert 'command not found: ""' in capsys.readouterr().err


def test_unwritable_outfile(tmp_path, infile, bin_env, capsys):
    outfile = tmp_path / "missing-dir" / "out.txt"
    status = run_pipeline(str(infile), "copy", "copy", str(outfile), bin_env)
    assert status == 1
    assert "open fileout" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path, infile, bin_env, monkeypatch):
    monkeypatch.setenv("PATH", bin_env["PATH"])
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "copy", "upper", str(outfile)]) == 0
    assert outfile.read_text() == "HELLO\n"