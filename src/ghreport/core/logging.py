"""
Logging for the report pipeline.

loguru is configured once per process by ``setup_logging``. Every module logs
through ``get_logger(__name__)``, which tags records with the module they came
from, and each pipeline stage runs under ``log_stage`` so the log shows how
long it took and, on failure, which kind of failure ended the run.
"""

import sys
import time
from typing import Callable, TypeVar

from loguru import logger

from ghreport.config.settings import get_settings
from ghreport.result import Result

T = TypeVar("T")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{extra[module]}</cyan> {message}"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} "
    "{extra[module]}:{function}:{line} {message}"
)


def setup_logging() -> None:
    """Install the stderr sink and, when ``log_to_file`` is set, a rotating file sink.

    Replaces any sinks added earlier, so calling it again applies changed
    settings.
    """
    settings = get_settings()

    handlers = [
        {
            "sink": sys.stderr,
            "level": settings.log_level,
            "format": CONSOLE_FORMAT,
            "colorize": True,
        }
    ]
    if settings.log_to_file:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            {
                "sink": settings.logs_dir / "ghreport_{time:YYYY-MM-DD}.log",
                "level": "DEBUG",
                "format": FILE_FORMAT,
                "rotation": settings.log_rotation,
                "retention": settings.log_retention,
                "compression": "gz",
                "enqueue": True,
            }
        )

    # records from loguru's global logger carry no module binding
    logger.configure(handlers=handlers, extra={"module": "ghreport"})
    logger.info(
        "Logging to stderr at {}{}",
        settings.log_level,
        f" and to {settings.logs_dir}" if settings.log_to_file else "",
    )


def get_logger(name: str):
    """Return the loguru logger bound to module ``name`` (usually ``__name__``)."""
    return logger.bind(module=name)


def _describe(stage: str, context: dict) -> str:
    if not context:
        return stage
    details = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{stage} [{details}]"


def log_stage(stage: str, run: Callable[[], Result[T]], **context) -> Result[T]:
    """Run one pipeline stage and log how it ended.

    Stages report failure through the returned Result rather than by raising,
    so the outcome is read from ``result["ok"]``. A failed stage is logged at
    ERROR with its failure kind. Exceptions are logged and re-raised.

    Example:
        >>> log_stage("Fetching GitHub profile",
        ...           lambda: fetch_profile("octocat"), username="octocat")
        # Logs: "Fetching GitHub profile [username=octocat] completed in 0.34s"
    """
    label = _describe(stage, context)
    stage_logger = logger.bind(module="ghreport.stage")
    stage_logger.info("{} started", label)
    started = time.perf_counter()
    try:
        result = run()
    except Exception as exc:
        stage_logger.error(
            "{} raised after {:.2f}s: {}", label, time.perf_counter() - started, exc
        )
        raise

    elapsed = time.perf_counter() - started
    if result["ok"]:
        stage_logger.info("{} completed in {:.2f}s", label, elapsed)
    else:
        stage_logger.error(
            "{} failed after {:.2f}s (kind={}): {}",
            label,
            elapsed,
            result["kind"],
            result["error"],
        )
    return result
