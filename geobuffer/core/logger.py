"""
Module `core.logger` configures logging for the geobuffer package.

Library modules only ask for named loggers; handlers are attached by
:meth:`Logger.setup`, which the CLI calls. Setup touches the ``geobuffer``
package logger alone, so importing the library leaves a host
application's root handlers as they are.
"""

import json
import logging
import os
from datetime import datetime, timezone

PACKAGE_LOGGER = "geobuffer"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp (UTC ISO8601), level, name, message."""

    def format(self, record):
        return json.dumps(
            {
                "timestamp": datetime.fromtimestamp(
                    record.created, timezone.utc
                ).isoformat(),
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
            }
        )


class Logger:
    """Attach a single stream handler to the package logger, once."""

    _configured = False

    @staticmethod
    def _resolve_level(level: int | str | None) -> int:
        if level is None:
            level = os.getenv("GEOBUFFER_LOG_LEVEL", "INFO")
        if isinstance(level, str):
            return getattr(logging, level.upper(), logging.INFO)
        return level

    @staticmethod
    def setup(
        level: int | str | None = None,
        fmt: str | None = None,
        datefmt: str = "%Y-%m-%d %H:%M:%S",
        stream=None,
    ) -> logging.Logger:
        """
        Configure the ``geobuffer`` logger and return it.

        ``level`` falls back to GEOBUFFER_LOG_LEVEL and ``fmt`` to
        GEOBUFFER_LOG_FMT; a format of ``json`` selects
        :class:`JSONFormatter`, anything else is a logging format string.
        Later calls are no-ops until :meth:`reset`.
        """
        pkg_logger = logging.getLogger(PACKAGE_LOGGER)
        if Logger._configured:
            return pkg_logger

        fmt_mode = fmt if fmt is not None else os.getenv("GEOBUFFER_LOG_FMT", "")
        if fmt_mode.lower() == "json":
            formatter: logging.Formatter = JSONFormatter(datefmt=datefmt)
        else:
            formatter = logging.Formatter(fmt_mode or DEFAULT_FORMAT, datefmt=datefmt)

        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        pkg_logger.handlers.clear()
        pkg_logger.addHandler(handler)
        pkg_logger.setLevel(Logger._resolve_level(level))
        pkg_logger.propagate = False
        Logger._configured = True
        return pkg_logger

    @staticmethod
    def reset() -> None:
        """Drop the package handler and hand records back to the root logger."""
        pkg_logger = logging.getLogger(PACKAGE_LOGGER)
        pkg_logger.handlers.clear()
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = True
        Logger._configured = False

    @staticmethod
    def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
        """Return a named logger without configuring any handlers."""
        return logging.getLogger(name)
