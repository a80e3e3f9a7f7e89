"""
Logging configuration for the ``yeoman`` command.

Two channels are set up once by main.py:

    diagnostics   every ``logging.getLogger(__name__)`` in the engine,
                  on the root logger, quiet (WARNING) unless asked
    actions       the ``yeoman_generators.actions`` logger, where
                  generators report the files they touch::

                        create  README.md
                         force  .gitignore
                     identical  test/index.html

Diagnostic level precedence:
    --debug / --verbose / --quiet  >  YEOMAN_LOG_LEVEL  >  WARNING

File actions are shown unless ``--quiet``.  YEOMAN_LOG_FILE captures
both channels at full detail (level from YEOMAN_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import sys

ACTION_LOGGER = "yeoman_generators.actions"

# widest action word is "identical"
_ACTION_WIDTH = 10

_FMT_CONSOLE = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"


class ActionFormatter(logging.Formatter):
    """Right-align the record's ``action`` in front of the path."""

    def format(self, record: logging.LogRecord) -> str:
        action = getattr(record, "action", record.levelname.lower())
        return f"{action:>{_ACTION_WIDTH}}  {record.getMessage()}"


def setup_logging(
    level: str | int = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    show_actions: bool = True,
) -> None:
    """Configure both logging channels for the process.

    Args:
        level: Diagnostic level, by name or number.
        log_file: Optional file receiving diagnostics and actions.
        log_file_level: Level for the file (defaults to ``level``).
        show_actions: Print generator file actions to stderr.
    """
    numeric_level = _parse_level(level)
    fmt, datefmt = _console_format(numeric_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    # actions never reach the diagnostic console
    actions = logging.getLogger(ACTION_LOGGER)
    _close_handlers(actions)
    actions.propagate = False
    actions.setLevel(logging.INFO)
    if show_actions:
        action_console = logging.StreamHandler(sys.stderr)
        action_console.setFormatter(ActionFormatter())
        actions.addHandler(action_console)

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)
        root.setLevel(min(numeric_level, file_level))
        actions.addHandler(fh)

    if not actions.handlers:
        actions.addHandler(logging.NullHandler())


def _console_format(level: int) -> tuple[str, str | None]:
    if level <= logging.DEBUG:
        return _FMT_CONSOLE[logging.DEBUG]
    if level <= logging.INFO:
        return _FMT_CONSOLE[logging.INFO]
    return "%(message)s", None


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _parse_level(level: str | int | None) -> int:
    """Level name or number to a number; unknown names mean WARNING."""
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get((level or "").upper(), logging.WARNING)
