from console.core.config import Settings
from console.core.logger_setup import QUIET_LOGGERS, logging_config


def make_settings(**overrides) -> Settings:
    config = Settings()
    config.LOG_LEVEL = "info"
    config.LOG_FILE = None
    for name, value in overrides.items():
        setattr(config, name, value)
    return config


def test_console_only_by_default():
    cfg = logging_config(make_settings())

    assert list(cfg["handlers"]) == ["console"]
    assert cfg["root"] == {"handlers": ["console"], "level": "INFO"}
    assert cfg["disable_existing_loggers"] is False


def test_log_file_adds_rotating_handler(tmp_path):
    path = str(tmp_path / "logs" / "console.log")
    cfg = logging_config(make_settings(LOG_FILE=path, LOG_MAX_BYTES=1024, LOG_BACKUPS=2))

    file_handler = cfg["handlers"]["file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert file_handler["filename"] == path
    assert (file_handler["maxBytes"], file_handler["backupCount"]) == (1024, 2)
    assert cfg["root"]["handlers"] == ["console", "file"]


def test_http_client_loggers_are_quieted():
    cfg = logging_config(make_settings(LOG_LEVEL="DEBUG"))

    assert set(cfg["loggers"]) == set(QUIET_LOGGERS)
    assert all(entry["level"] == "WARNING" for entry in cfg["loggers"].values())
    assert cfg["root"]["level"] == "DEBUG"
