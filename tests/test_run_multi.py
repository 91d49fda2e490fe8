import io
import subprocess

import pytest

from advent.day import Day
from advent.run_multi import parse_exec_time, parse_time, run_multi, run_solution
from advent.timings import Timings


class _FakePopen:
    commands: list = []
    stdout_text = ""
    stderr_text = ""

    def __init__(self, command, **kwargs):
        _FakePopen.commands.append(list(command))
        self.stdout = io.StringIO(_FakePopen.stdout_text)
        self.stderr = io.StringIO(_FakePopen.stderr_text)

    def wait(self):
        return 0


@pytest.fixture
def fake_child(monkeypatch):
    _FakePopen.commands = []
    _FakePopen.stdout_text = "Part 1: 1 (2ms @ 10 samples)\nPart 2: 2 (3ms @ 10 samples)\n"
    _FakePopen.stderr_text = "warn\n"
    monkeypatch.setattr(subprocess, "Popen", _FakePopen)
    return _FakePopen.commands


@pytest.fixture
def solution_dir(tmp_path, monkeypatch):
    solutions = tmp_path / "advent" / "solutions"
    solutions.mkdir(parents=True)
    (solutions / "day02.py").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parses_execution_times():
    res = parse_exec_time(
        [
            "Part 1: 0 (74.13ns @ 100000 samples)",
            "Part 2: 10 (74.13ms @ 99999 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(74130074.13, abs=1e-6)
    assert res.part_1 == "74.13ns"
    assert res.part_2 == "74.13ms"


def test_parses_with_patterns_in_input():
    res = parse_exec_time(
        [
            "Part 1: @ @ @ ( ) ms (2s @ 5 samples)",
            "Part 2: 10s (100ms @ 1 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(2100000000.0, abs=1e-6)
    assert res.part_1 == "2s"
    assert res.part_2 == "100ms"


def test_parses_missing_parts():
    res = parse_exec_time(["Part 1: ✖        ", "Part 2: ✖        ", ""], Day(1))
    assert res.total_nanos == pytest.approx(0.0, abs=1e-6)
    assert res.part_1 is None
    assert res.part_2 is None


def test_parse_time_microseconds():
    assert parse_time("Part 1: 5 (1.5µs @ 20 samples)") == ("1.5µs", 1500.0)


def test_parse_time_rejects_garbage():
    assert parse_time("Part 1: x (abc @ 3 samples)") is None


def test_unparseable_line_is_reported(capsys):
    res = parse_exec_time(["Part 1: x (abc @ 3 samples)"], Day(1))
    assert res.part_1 is None
    assert "Could not parse timings from line" in capsys.readouterr().err


def test_run_solution_without_module(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_solution(Day(2), True, False) == []


def test_run_solution_collects_output(solution_dir, fake_child, capsys):
    lines = run_solution(Day(2), True, True)
    assert lines == ["Part 1: 1 (2ms @ 10 samples)", "Part 2: 2 (3ms @ 10 samples)"]
    command = fake_child[0]
    assert "--time" in command
    assert "-O" in command
    assert any("day02" in part for part in command)
    captured = capsys.readouterr()
    assert "Part 1: 1 (2ms @ 10 samples)" in captured.out
    assert "warn" in captured.err


def test_run_solution_untimed_has_no_time_flag(solution_dir, fake_child):
    lines = run_solution(Day(2), False, False)
    assert lines == ["Part 1: 1 (2ms @ 10 samples)", "Part 2: 2 (3ms @ 10 samples)"]
    assert len(fake_child) == 1
    assert "--time" not in fake_child[0]
    assert "-O" not in fake_child[0]


def test_run_multi_timed(solution_dir, fake_child, capsys):
    timings = run_multi({Day(2)}, False, True)
    assert isinstance(timings, Timings)
    assert [int(t.day) for t in timings.data] == [2]
    assert timings.data[0].part_1 == "2ms"
    assert timings.data[0].part_2 == "3ms"
    assert timings.total_millis() == pytest.approx(5.0)
    assert "Total (Run):" in capsys.readouterr().out


def test_run_multi_untimed_unsolved(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert run_multi({Day(3), Day(1)}, False, False) is None
    out = capsys.readouterr().out
    assert out.index("Day 01") < out.index("Day 03")
    assert out.count("Not solved.") == 2