from __future__ import annotations

import pytest

from shared.common import is_verbose, parse_bool, parse_runner_debug, set_verbose_enabled, vprint


@pytest.mark.parametrize(
    "raw, expected",
    [(None, True), ("", True), ("true", True), ("Yes", True), ("1", True), ("false", False), ("OFF", False), ("x", None)],
)
def test_parse_bool(raw, expected) -> None:
    assert parse_bool(raw, default=True) is expected


def test_parse_runner_debug(monkeypatch) -> None:
    monkeypatch.setenv("RUNNER_DEBUG", "1")
    assert parse_runner_debug() is True

    monkeypatch.setenv("RUNNER_DEBUG", "yes")
    with pytest.raises(SystemExit):
        parse_runner_debug()


def test_vprint_respects_verbose_flag(capsys) -> None:
    set_verbose_enabled(False)
    vprint("hidden")
    set_verbose_enabled(True)
    vprint("shown")
    set_verbose_enabled(False)

    assert capsys.readouterr().out == "shown\n"
    assert is_verbose() is False
