import logging
import sys
from pathlib import Path


FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str = "jsondiffreport",
    log_file: str | None = None,
    console_level: int = logging.CRITICAL + 1,  # default: silent
    file_level: int | None = None,
):
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    # Console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(console_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        fh.setLevel(file_level or logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


class Log:
    """Process-wide logger, configured once by the CLI."""

    def __init__(self, name: str = "jsondiffreport"):
        self.name = name
        self._logger = get_logger(name)

    def configure(self, debug: bool = False, log_file: str | None = None):
        console_level = logging.DEBUG if debug else logging.CRITICAL + 1
        self._logger = get_logger(self.name, log_file=log_file, console_level=console_level)

    def debug(self, msg, *args):
        self._logger.debug(msg, *args)

    def info(self, msg, *args):
        self._logger.info(msg, *args)

    def warning(self, msg, *args):
        self._logger.warning(msg, *args)

    def error(self, msg, *args):
        self._logger.error(msg, *args)

    def close(self):
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)


log = Log()
