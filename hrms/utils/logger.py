import logging

from hrms.core.config.hrms_settings import get_settings

LOG_FORMAT = "%(levelname)s : %(asctime)s | %(name)s  | %(message)s"


class Logger:
    def __init__(self, name: str = "hrms", level: str | None = None):
        self.name = name
        self.logger = logging.getLogger(name)

        if level is None:
            level = get_settings().log_level
        self.logger.setLevel(level.upper())

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def info(self, message, **kwargs):
        self.logger.info(message, **kwargs)

    def error(self, message, **kwargs):
        """Log error message, pass exc_info=True to include the traceback"""
        self.logger.error(message, **kwargs)

    def warning(self, message, **kwargs):
        self.logger.warning(message, **kwargs)

    def critical(self, message, **kwargs):
        self.logger.critical(message, **kwargs)
