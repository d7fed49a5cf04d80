# tests/test_cli.py

from __future__ import annotations

import sys

import pytest

from simple_task import cli


def test_cli_runs_app_through_streamlit(monkeypatch) -> None:
    seen = {}

    def fake_main():
        seen["argv"] = list(sys.argv)
        return 0

    monkeypatch.setattr(cli.stcli, "main", fake_main)
    monkeypatch.setattr(sys, "argv", ["simple-task", "--server.port", "8600"])

    with pytest.raises(SystemExit) as exc:
        cli.main()

    assert exc.value.code == 0
    assert seen["argv"] == ["streamlit", "run", str(cli.APP_PATH), "--server.port", "8600"]
    assert cli.APP_PATH.is_file()
