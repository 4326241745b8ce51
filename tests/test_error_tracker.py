# tests/test_error_tracker.py
"""Tests for error collection on top of the logger."""

from __future__ import annotations

import pytest

from prefixlog.error_tracker import ErrorTracker, error_scope
from prefixlog.registry import LoggerRegistry


def test_record_logs_and_collects(no_timestamps: LoggerRegistry, capsys: pytest.CaptureFixture[str]) -> None:
    tracker = ErrorTracker(context="io")

    tracker.record("read", ValueError("boom"))
    tracker.record("read", "disk gone")

    assert tracker.errors == {"read": ["ValueError: boom", "disk gone"]}
    assert capsys.readouterr().err == "[io] read: ValueError: boom\n[io] read: disk gone\n"


def test_summary_warns_per_key(no_timestamps: LoggerRegistry, capsys: pytest.CaptureFixture[str]) -> None:
    tracker = ErrorTracker(context="io")
    tracker.record("read", "a")
    tracker.record("write", "b")
    capsys.readouterr()

    summary = tracker.summary()

    assert summary == {"read": ["a"], "write": ["b"]}
    assert summary is not tracker.errors
    assert capsys.readouterr().err == (
        "[io] Encountered 1 issues for read\n[io] Encountered 1 issues for write\n"
    )


def test_empty_summary(no_timestamps: LoggerRegistry, capsys: pytest.CaptureFixture[str]) -> None:
    assert ErrorTracker().summary() == {}
    assert capsys.readouterr().err == ""


def test_error_scope_logs_and_reraises(
    no_timestamps: LoggerRegistry, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(KeyError):
        with error_scope("job"):
            raise KeyError("missing")

    err = capsys.readouterr().err
    assert err.startswith("[job] Traceback:\nTraceback (most recent call last):")
    assert "KeyError: 'missing'" in err


def test_error_scope_can_swallow(no_timestamps: LoggerRegistry, capsys: pytest.CaptureFixture[str]) -> None:
    with error_scope("job", reraise=False):
        raise RuntimeError("ignored")

    assert "RuntimeError: ignored" in capsys.readouterr().err
