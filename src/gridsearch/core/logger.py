import logging
import os
from datetime import datetime
from typing import Optional

from gridsearch.config import LOGGER_NAME, LOG_FORMAT, LOG_LEVEL


class SearchLogger:
    _instance = None

    def __new__(cls, log_dir: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super(SearchLogger, cls).__new__(cls)
            cls._instance._setup()
        if log_dir:
            cls._instance.attach_file(log_dir)
        return cls._instance

    def _setup(self):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        self._file_handler: Optional[logging.FileHandler] = None

    def attach_file(self, log_dir: str):
        """Mirror the search log into a dated file under log_dir."""
        if self._file_handler is not None:
            return
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(
            os.path.join(log_dir, f'search_{datetime.now().strftime("%Y%m%d")}.log'))
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(fh)
        self._file_handler = fh

    def detach_file(self):
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    @property
    def log_file(self) -> Optional[str]:
        return self._file_handler.baseFilename if self._file_handler else None

    def log_event(self, category: str, message: str,
                  level: int = logging.INFO, echo: bool = False):
        if echo:
            print(f"[{category}] {message}")
        self.logger.log(level, f"[{category}] {message}")

    def debug(self, category: str, message: str):
        self.logger.debug(f"[{category}] {message}")

    @property
    def debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)
