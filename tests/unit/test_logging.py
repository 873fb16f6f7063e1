"""Unit tests for logging utilities."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from bsptree.utils import TreeLogger, TreeStats, configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_bsptree_handler", False):
            root.removeHandler(handler)
            handler.close()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "bsptree.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Scene loaded", polygons=4)

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in text
        assert "Scene loaded" in text

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        configure_logging(log_file=tmp_path / "a.log", quiet=True)
        configure_logging(log_file=tmp_path / "b.log", quiet=True)

        ours = [h for h in logging.getLogger().handlers if getattr(h, "_bsptree_handler", False)]
        assert len(ours) == 2


class TestTreeLogger:
    """Tests for TreeLogger."""

    def test_records_rejections(self) -> None:
        with capture_logs() as logs:
            tree_logger = TreeLogger(structlog.get_logger("bsptree"))
            tree_logger.log_rejected(9, ValueError("bad edge"))
            tree_logger.log_stats(TreeStats(height=2, node_count=3))

        assert tree_logger.rejected == [(9, "bad edge")]
        assert logs[0]["event"] == "Polygon rejected"
        assert logs[0]["error_type"] == "ValueError"
        assert logs[1]["node_count"] == 3
