from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tasktui.custom_logger import log, log_manager, setup_logging


if TYPE_CHECKING:
    from pathlib import Path


def test_file_sink_writes_to_configured_directory(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    try:
        setup_logging(console_level="CRITICAL", file_level="INFO", log_dir=log_dir, log_file="test.log")
        log.debug("not written")
        log.info("task added")
        logging.getLogger("third.party").warning("routed from stdlib")
    finally:
        setup_logging(console_level="WARNING", log_dir=None)

    content = (log_dir / "test.log").read_text(encoding="utf-8")
    assert "task added" in content
    assert "routed from stdlib" in content
    assert "not written" not in content


def test_file_sink_can_be_disabled(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=None)

    assert log_manager.file_sink_id is None
    assert log_manager.log_path is None
