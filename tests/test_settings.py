import logging
from contextlib import contextmanager

from settings import Settings, get_settings, setup_logging


@contextmanager
def isolated_root_logger():
    """Restore the root logger's handlers and level after the block."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_defaults():
    settings = Settings()
    assert settings.page_title == "BMI Calculator"
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.timezone == "UTC"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BMI_LOG_LEVEL", "debug")
    monkeypatch.setenv("BMI_TIMEZONE", "Asia/Singapore")
    settings = Settings()
    assert settings.log_level == "debug"
    assert settings.timezone == "Asia/Singapore"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_creates_log_file(tmp_path):
    log_file = tmp_path / "logs" / "bmi.log"

    with isolated_root_logger() as root:
        setup_logging(Settings(log_level="debug", log_file=str(log_file)), force=True)
        logging.getLogger("bmi_engine").debug("hello")

        assert root.level == logging.DEBUG
        assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    assert log_file.exists()


def test_repeated_setup_opens_log_file_once(tmp_path, monkeypatch):
    opened = []

    class RecordingFileHandler(logging.FileHandler):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            opened.append(self)

    monkeypatch.setattr(logging, "FileHandler", RecordingFileHandler)
    settings = Settings(log_file=str(tmp_path / "bmi.log"))

    with isolated_root_logger() as root:
        setup_logging(settings, force=True)
        setup_logging(settings)
        setup_logging(settings)

        assert len(opened) == 1
        assert [handler for handler in root.handlers if isinstance(handler, RecordingFileHandler)] == opened


def test_setup_logging_leaves_configured_root_alone():
    with isolated_root_logger() as root:
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.WARNING)
        handlers = root.handlers[:]

        setup_logging(Settings(log_level="debug"))

        assert root.handlers == handlers
        assert root.level == logging.WARNING
