"""Logging utilities for bsptree."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import structlog

_HANDLER_MARK = "_bsptree_handler"


@dataclass
class TreeStats:
    """Structural statistics of a tree."""

    height: int = 0
    node_count: int = 0
    polygon_count: int = 0
    inserted_count: int = 0
    split_count: int = 0
    discarded_fragments: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bsptree")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TreeLogger:
    """Logger for tracking scene construction against a tree."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._rejected: list[tuple[int, str]] = []

    def log_insert(self, polygon_id: int, node_count: int) -> None:
        """Log a successful insert."""
        self._logger.debug("Polygon inserted", polygon=polygon_id, nodes=node_count)

    def log_rejected(self, polygon_id: int, error: Exception) -> None:
        """Log a polygon the tree refused."""
        self._logger.warning(
            "Polygon rejected",
            polygon=polygon_id,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._rejected.append((polygon_id, str(error)))

    def log_stats(self, stats: TreeStats) -> None:
        """Log tree statistics after construction."""
        self._logger.info("Tree built", **stats.to_dict())

    def log_order(self, viewpoint: tuple[float, float], order: list[int]) -> None:
        """Log a painter's order computed for a viewpoint."""
        self._logger.debug("Painter order", viewpoint=viewpoint, order=order)

    @property
    def rejected(self) -> list[tuple[int, str]]:
        """Polygons rejected so far with their error messages."""
        return self._rejected
