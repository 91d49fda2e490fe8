import subprocess
from unittest.mock import patch

import pytest

from advent import aoc_cli
from advent.day import Day


@pytest.fixture(autouse=True)
def no_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)


def _ok(args, *rest, **kwargs):
    return subprocess.CompletedProcess(args, 0)


def test_input_path():
    assert aoc_cli.get_input_path(Day(5)) == "data/inputs/05.txt"


def test_puzzle_path():
    assert aoc_cli.get_puzzle_path(Day(12)) == "data/puzzles/12.md"


def test_build_args_without_year():
    assert aoc_cli.build_args("read", ["--flag"], Day(3)) == ["--flag", "--day", "03", "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2025")
    assert aoc_cli.build_args("download", [], Day(1)) == [
        "--year",
        "2025",
        "--day",
        "01",
        "download",
    ]


@pytest.mark.parametrize("year", ["abc", "", "-1", "70000"])
def test_build_args_ignores_invalid_year(monkeypatch, year):
    monkeypatch.setenv("AOC_YEAR", year)
    assert "--year" not in aoc_cli.build_args("read", [], Day(1))


def test_build_args_does_not_modify_input():
    extra = ["--a"]
    aoc_cli.build_args("read", extra, Day(2))
    assert extra == ["--a"]


def test_check_raises_when_missing():
    with patch("advent.aoc_cli.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(aoc_cli.AocCommandNotFound):
            aoc_cli.check()


def test_check_calls_version():
    def missing_only_for_version(command, *rest, **kwargs):
        if list(command) == ["aoc", "-V"]:
            raise FileNotFoundError(command[0])
        return subprocess.CompletedProcess(command, 0)

    with patch("advent.aoc_cli.subprocess.run", side_effect=missing_only_for_version):
        with pytest.raises(aoc_cli.AocCommandNotFound):
            aoc_cli.check()


def test_read_arguments():
    with patch("advent.aoc_cli.subprocess.run", side_effect=_ok) as run:
        output = aoc_cli.read(Day(4))
    assert output.returncode == 0
    assert run.call_args.args[0] == [
        "aoc",
        "--description-only",
        "--puzzle-file",
        "data/puzzles/04.md",
        "--day",
        "04",
        "read",
    ]


def test_download_arguments_and_messages(capsys):
    with patch("advent.aoc_cli.subprocess.run", side_effect=_ok) as run:
        aoc_cli.download(Day(6))
    assert run.call_args.args[0] == [
        "aoc",
        "--overwrite",
        "--input-file",
        "data/inputs/06.txt",
        "--puzzle-file",
        "data/puzzles/06.md",
        "--day",
        "06",
        "download",
    ]
    out = capsys.readouterr().out
    assert 'Successfully wrote input to "data/inputs/06.txt".' in out
    assert 'Successfully wrote puzzle to "data/puzzles/06.md".' in out


def test_submit_argument_order():
    with patch("advent.aoc_cli.subprocess.run", side_effect=_ok):
        output = aoc_cli.submit(Day(2), 1, "answer")
    assert output.returncode == 0
    assert list(output.args) == ["aoc", "--day", "02", "submit", "1", "answer"]


def test_bad_exit_status():
    failed = subprocess.CompletedProcess(["aoc"], 3)
    with patch("advent.aoc_cli.subprocess.run", return_value=failed):
        with pytest.raises(aoc_cli.AocBadExitStatus) as info:
            aoc_cli.submit(Day(2), 2, "x")
    assert info.value.output.returncode == 3
    assert str(info.value) == "aoc-cli exited with a non-zero status."


def test_not_callable():
    with patch("advent.aoc_cli.subprocess.run", side_effect=PermissionError):
        with pytest.raises(aoc_cli.AocCommandNotCallable):
            aoc_cli.read(Day(1))


def test_errors_share_base_class():
    with patch("advent.aoc_cli.subprocess.run", side_effect=OSError):
        with pytest.raises(aoc_cli.AocCommandError):
            aoc_cli.download(Day(1))