"""Package logger for objectiter.

Level and format default to :data:`objectiter.core.config.settings`, which
reads the ``OBJECTITER_LOG_LEVEL`` and ``OBJECTITER_LOG_FORMAT`` environment
variables. Output goes to stdout and does not propagate to the root logger.
"""

import logging
import sys
import typing as tp

from objectiter.core.config import Settings, settings

__all__ = ["HANDLER_NAME", "logger", "owned_handlers", "setup_logger"]

HANDLER_NAME = "objectiter.stdout"


def owned_handlers(target: logging.Logger) -> tp.List[logging.Handler]:
    """Handlers attached to ``target`` by :func:`setup_logger`."""
    return [h for h in target.handlers if h.get_name() == HANDLER_NAME]


def setup_logger(
    name: str = "objectiter",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach the objectiter stdout handler to a logger, once.

    Args:
        name: Logger name
        level: Log level name, case-insensitive; defaults to ``settings.LOG_LEVEL``
        format_string: ``logging.Formatter`` format; defaults to ``settings.LOG_FORMAT``

    Returns:
        The named logger. A logger that already carries the handler is
        returned untouched, whatever other handlers are present.

    Raises:
        pydantic.ValidationError: If ``level`` is not a known level name.
    """
    target = logging.getLogger(name)
    if owned_handlers(target):
        return target

    config = Settings(
        LOG_LEVEL=level or settings.LOG_LEVEL,
        LOG_FORMAT=format_string or settings.LOG_FORMAT,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(fmt=config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    target.addHandler(handler)
    target.setLevel(config.LOG_LEVEL)
    target.propagate = False
    return target


logger = setup_logger()
