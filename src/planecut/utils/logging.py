"""Structured logging and run statistics for batch crops."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "planecut"


@dataclass
class ProcessingStats:
    """Counts and timings from one batch crop run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    polygons_emitted: int = 0
    cancelled_count: int = 0
    was_cancelled: bool = False
    errors: list[tuple[str, str]] = field(default_factory=list)
    job_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    def record_success(self, polygons_emitted: int, duration_ms: float) -> None:
        self.processed_count += 1
        self.polygons_emitted += polygons_emitted
        self.job_timings_ms.append(duration_ms)

    def record_error(self, job_name: str, message: str) -> None:
        self.error_count += 1
        self.errors.append((job_name, message))

    def record_cancelled(self, pending_count: int) -> None:
        self.was_cancelled = True
        self.cancelled_count = pending_count

    @property
    def duration_seconds(self) -> float:
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_job_time_ms(self) -> float | None:
        if not self.job_timings_ms:
            return None
        return sum(self.job_timings_ms) / len(self.job_timings_ms)

    @property
    def min_job_time_ms(self) -> float | None:
        return min(self.job_timings_ms) if self.job_timings_ms else None

    @property
    def max_job_time_ms(self) -> float | None:
        return max(self.job_timings_ms) if self.job_timings_ms else None


def _named_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    return handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Route structlog events through stdlib logging.

    Console output is plain text; the optional log file also gets timestamps
    and logger names. Handlers installed by an earlier call are replaced, so
    configuring twice does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, only errors reach the console

    Returns:
        The "planecut" structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = _named_handler(
        logging.StreamHandler(),
        logging.ERROR if quiet else getattr(logging, console_level.upper()),
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = _named_handler(
            logging.FileHandler(log_file, encoding="utf-8"),
            getattr(logging, file_level.upper()),
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("planecut")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)
    return logger


class ProcessingLogger:
    """Structured log events for the lifecycle of crop jobs."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def log_job_start(self, job_name: str) -> None:
        self._logger.debug("Processing job", job=job_name)

    def log_job_complete(self, job_name: str, polygons_emitted: int, duration_ms: float) -> None:
        self._logger.info(
            "Job processed",
            job=job_name,
            polygons=polygons_emitted,
            duration_ms=round(duration_ms, 2),
        )

    def log_job_skipped(self, job_name: str, reason: str) -> None:
        self._logger.debug("Job skipped", job=job_name, reason=reason)

    def log_job_error(self, job_name: str, error: str, traceback: str | None = None) -> None:
        self._logger.error("Job processing failed", job=job_name, error=error, traceback=traceback)

    def log_cancelled(self, stats: ProcessingStats) -> None:
        self._logger.warning(
            "Processing cancelled",
            processed=stats.processed_count,
            pending=stats.cancelled_count,
        )

    def log_run_complete(self, stats: ProcessingStats) -> None:
        self._logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            polygons=stats.polygons_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )
