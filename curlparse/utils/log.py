from __future__ import annotations

import logging
import platform
import sys
from logging.config import dictConfig
from typing import TYPE_CHECKING

import curlparse
from curlparse.settings import Settings
from curlparse.utils.versions import get_versions

if TYPE_CHECKING:
    from curlparse.settings import BaseSettings


logger = logging.getLogger(__name__)


DEFAULT_LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "curlparse": {"level": "DEBUG"},
    },
}

_curlparse_root_handler: logging.Handler | None = None


class TopLevelFormatter(logging.Filter):
    """Keep only top level loggers' name (direct children from root) from
    records.

    This filter will replace curlparse loggers' names with 'curlparse'. This
    mimics the old logging behavior where every message was logged under the
    package name.
    """

    def __init__(self, loggers: list[str] | None = None):
        super().__init__()
        self.loggers: list[str] = loggers or []

    def filter(self, record: logging.LogRecord) -> bool:
        if any(record.name.startswith(logger + ".") for logger in self.loggers):
            record.name = record.name.split(".", 1)[0]
        return True


def configure_logging(
    settings: BaseSettings | None = None, install_root_handler: bool = True
) -> None:
    """
    Initialize logging defaults for curlparse.

    This function does:

    - Route warnings through python logging
    - Assign DEBUG and ERROR level to the curlparse logger
    - Install a root handler configured from the given settings, unless
      ``install_root_handler`` is false
    """
    if not sys.warnoptions:
        # Route warnings through python logging
        logging.captureWarnings(True)

    dictConfig(DEFAULT_LOGGING)

    if settings is None:
        settings = Settings()

    if install_root_handler:
        install_curlparse_root_handler(settings)


def _uninstall_curlparse_root_handler() -> None:
    global _curlparse_root_handler  # noqa: PLW0603

    if (
        _curlparse_root_handler is not None
        and _curlparse_root_handler in logging.root.handlers
    ):
        logging.root.removeHandler(_curlparse_root_handler)
    _curlparse_root_handler = None


def install_curlparse_root_handler(settings: BaseSettings) -> None:
    global _curlparse_root_handler  # noqa: PLW0603

    _uninstall_curlparse_root_handler()
    logging.root.setLevel(logging.NOTSET)
    _curlparse_root_handler = _get_handler(settings)
    logging.root.addHandler(_curlparse_root_handler)


def get_curlparse_root_handler() -> logging.Handler | None:
    return _curlparse_root_handler


def _get_handler(settings: BaseSettings) -> logging.Handler:
    """Return a log handler object according to settings"""
    filename = settings.get("LOG_FILE")
    handler: logging.Handler
    if filename:
        mode = "a" if settings.getbool("LOG_FILE_APPEND") else "w"
        encoding = settings.get("LOG_ENCODING")
        handler = logging.FileHandler(filename, mode=mode, encoding=encoding)
    elif settings.getbool("LOG_ENABLED"):
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()

    formatter = logging.Formatter(
        fmt=settings.get("LOG_FORMAT"), datefmt=settings.get("LOG_DATEFORMAT")
    )
    handler.setFormatter(formatter)
    handler.setLevel(settings.get("LOG_LEVEL"))
    if settings.getbool("LOG_SHORT_NAMES"):
        handler.addFilter(TopLevelFormatter(["curlparse"]))
    return handler


def log_curlparse_info(settings: BaseSettings) -> None:
    logger.info("curlparse %(version)s started", {"version": curlparse.__version__})
    software = settings.getlist("LOG_VERSIONS")
    if not software:
        return
    versions = ", ".join(f"{name} {version}" for name, version in get_versions(software))
    logger.info("Versions: %(versions)s, Python %(python)s, Platform %(platform)s", {
        "versions": versions,
        "python": platform.python_version(),
        "platform": platform.platform(),
    })
