from __future__ import annotations

import logging

import pytest
from testfixtures import LogCapture

import curlparse
from curlparse.settings import Settings
from curlparse.utils.log import (
    TopLevelFormatter,
    _get_handler,
    _uninstall_curlparse_root_handler,
    configure_logging,
    get_curlparse_root_handler,
    log_curlparse_info,
)


@pytest.fixture
def root_handler_cleanup():
    yield
    _uninstall_curlparse_root_handler()
    logging.captureWarnings(False)


class TestTopLevelFormatter:
    def setup_method(self):
        self.handler = LogCapture()
        self.handler.addFilter(TopLevelFormatter(["test"]))

    def test_top_level_logger(self):
        logger = logging.getLogger("test")
        with self.handler as log:
            logger.warning("test log msg")
        log.check(("test", "WARNING", "test log msg"))

    def test_children_logger(self):
        logger = logging.getLogger("test.test1")
        with self.handler as log:
            logger.warning("test log msg")
        log.check(("test", "WARNING", "test log msg"))

    def test_overlapping_name_logger(self):
        logger = logging.getLogger("test2")
        with self.handler as log:
            logger.warning("test log msg")
        log.check(("test2", "WARNING", "test log msg"))

    def test_different_name_logger(self):
        logger = logging.getLogger("different")
        with self.handler as log:
            logger.warning("test log msg")
        log.check(("different", "WARNING", "test log msg"))


class TestGetHandler:
    def test_stream_handler(self):
        handler = _get_handler(Settings({"LOG_LEVEL": "WARNING"}))
        assert type(handler) is logging.StreamHandler
        assert handler.level == logging.WARNING
        assert handler.formatter._fmt == Settings()["LOG_FORMAT"]

    def test_disabled(self):
        handler = _get_handler(Settings({"LOG_ENABLED": False}))
        assert isinstance(handler, logging.NullHandler)

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "curlparse.log"
        handler = _get_handler(Settings({"LOG_FILE": str(log_file), "LOG_ENABLED": False}))
        try:
            assert isinstance(handler, logging.FileHandler)
            assert handler.mode == "a"
        finally:
            handler.close()

    def test_file_handler_overwrite(self, tmp_path):
        log_file = tmp_path / "curlparse.log"
        handler = _get_handler(
            Settings({"LOG_FILE": str(log_file), "LOG_FILE_APPEND": False})
        )
        try:
            assert handler.mode == "w"
        finally:
            handler.close()

    def test_short_names(self):
        handler = _get_handler(Settings({"LOG_SHORT_NAMES": True}))
        assert any(isinstance(f, TopLevelFormatter) for f in handler.filters)


@pytest.mark.usefixtures("root_handler_cleanup")
class TestConfigureLogging:
    def test_installs_root_handler(self):
        configure_logging(Settings({"LOG_ENABLED": False}))
        handler = get_curlparse_root_handler()
        assert handler is not None
        assert handler in logging.root.handlers

    def test_replaces_previous_handler(self):
        configure_logging(Settings({"LOG_ENABLED": False}))
        first = get_curlparse_root_handler()
        configure_logging(Settings({"LOG_ENABLED": False}))
        assert first not in logging.root.handlers
        assert get_curlparse_root_handler() in logging.root.handlers

    def test_without_root_handler(self):
        configure_logging(install_root_handler=False)
        assert get_curlparse_root_handler() is None

    def test_curlparse_logger_level(self):
        configure_logging(install_root_handler=False)
        assert logging.getLogger("curlparse").level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "curlparse.log"
        configure_logging(Settings({"LOG_FILE": str(log_file), "LOG_LEVEL": "DEBUG"}))
        logging.getLogger("curlparse.parser").debug("Unrecognized curl option --foo")
        get_curlparse_root_handler().close()
        content = log_file.read_text(encoding="utf-8")
        assert "[curlparse.parser] DEBUG: Unrecognized curl option --foo" in content


class TestLogCurlparseInfo:
    def test_versions(self):
        with LogCapture("curlparse.utils.log") as log:
            log_curlparse_info(Settings())
        messages = [record.getMessage() for record in log.records]
        assert messages[0] == f"curlparse {curlparse.__version__} started"
        assert messages[1].startswith("Versions: w3lib ")
        assert ", rich " in messages[1]

    def test_no_versions(self):
        with LogCapture("curlparse.utils.log") as log:
            log_curlparse_info(Settings({"LOG_VERSIONS": []}))
        log.check(
            (
                "curlparse.utils.log",
                "INFO",
                f"curlparse {curlparse.__version__} started",
            )
        )
