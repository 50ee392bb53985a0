"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

import run
from zxdisplay.video.palette import BLACK, BRIGHT_RED, BRIGHT_YELLOW


def test_defaults() -> None:
    args = run.build_arg_parser().parse_args([])
    assert args.scale == 3
    assert args.demo == "charset"
    assert args.ink == BLACK
    assert args.paper == BRIGHT_YELLOW


def test_colour_options() -> None:
    args = run.build_arg_parser().parse_args(["--ink", "bright-red", "--paper", "1"])
    assert args.ink == BRIGHT_RED
    assert args.paper == 1


def test_bad_colour_rejected() -> None:
    with pytest.raises(SystemExit):
        run.build_arg_parser().parse_args(["--ink", "99"])


def test_main_runs_app(monkeypatch) -> None:
    seen = []
    monkeypatch.setattr(run.ZXDisplayApp, "run", lambda self: seen.append(self))
    assert run.main(["--demo", "noise", "--seed", "1"]) == 0
    assert len(seen) == 1


def test_main_reports_runtime_error(monkeypatch, capsys) -> None:
    def fail(self) -> None:
        raise RuntimeError("pygame is required to run the UI")

    monkeypatch.setattr(run.ZXDisplayApp, "run", fail)
    with pytest.raises(SystemExit) as excinfo:
        run.main([])
    assert excinfo.value.code == 1
    assert "pygame is required" in capsys.readouterr().err


def test_non_positive_scale_rejected() -> None:
    with pytest.raises(SystemExit):
        run.main(["--scale", "0"])
