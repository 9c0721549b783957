from __future__ import annotations

import pytest

from tasktui import main as entry_point


class ReadOnlySettings:
    """Settings whose data directory cannot be written."""

    def ensure_env_file(self) -> None:
        msg = "Read-only file system"
        raise OSError(msg)


def test_unwritable_data_directory_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(entry_point, "get_settings", ReadOnlySettings)

    def unexpected_app() -> None:
        pytest.fail("the app must not start")

    monkeypatch.setattr(entry_point, "TaskTUI", unexpected_app)

    with pytest.raises(SystemExit, match="application data directory"):
        entry_point.main()
