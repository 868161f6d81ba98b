import logging.config
from pathlib import Path

from utils.app_config import LOG_DIR


def build_logging_config(level: str = "INFO", log_dir: Path | None = LOG_DIR) -> dict:
    """dictConfig schema for the app. log_dir=None disables the file handler."""
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "simple",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(Path(log_dir) / "app.log"),
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
            "verbose": {
                "format": "%(asctime)s %(levelname)s %(name)s "
                "[%(process)d:%(threadName)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            # root logger
            "": {
                "level": "DEBUG",
                "handlers": list(handlers),
            },
            "urllib3": {"level": "WARNING", "propagate": True},
            "matplotlib": {"level": "WARNING", "propagate": True},
        },
    }


def configure_logging(level: str = "INFO", log_dir: Path | None = LOG_DIR) -> None:
    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, log_dir))
