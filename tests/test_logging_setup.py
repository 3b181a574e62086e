"""File logging bootstrap."""

import logging

import servarr_tui.io.logging_setup as logging_setup


class TestConfigure:
    def test_writes_to_log_dir(self, log_dir, monkeypatch):
        monkeypatch.delenv(logging_setup.LOG_LEVEL_ENV, raising=False)
        runtime = logging_setup.configure()
        assert runtime.file_path == str(log_dir / logging_setup.LOG_FILE_NAME)
        logging.getLogger("servarr_tui.network.client").info("hello from the worker")
        for handler in logging.getLogger("servarr_tui").handlers:
            handler.flush()
        text = (log_dir / logging_setup.LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "INFO servarr_tui.network.client" in text
        assert "hello from the worker" in text

    def test_idempotent(self, log_dir):
        first = logging_setup.configure()
        second = logging_setup.configure()
        assert first is second
        assert len(logging.getLogger("servarr_tui").handlers) == 1
        assert logging_setup.get_runtime() is first

    def test_does_not_propagate_to_terminal(self, log_dir):
        logging_setup.configure()
        assert logging.getLogger("servarr_tui").propagate is False

    def test_level_from_env(self, log_dir, monkeypatch):
        monkeypatch.setenv(logging_setup.LOG_LEVEL_ENV, "debug")
        runtime = logging_setup.configure()
        assert (runtime.level_name, runtime.level) == ("DEBUG", logging.DEBUG)

    def test_unknown_level_is_info(self, log_dir, monkeypatch):
        monkeypatch.setenv(logging_setup.LOG_LEVEL_ENV, "chatty")
        assert logging_setup.configure().level == logging.INFO


class TestReset:
    def test_reset_detaches(self, log_dir):
        logging_setup.configure()
        logging_setup.reset()
        assert logging.getLogger("servarr_tui").handlers == []
        assert logging.getLogger("servarr_tui").propagate is True
        assert logging_setup.get_runtime() is None
