import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from product_arranger.utils.constants import LOG_DIR, CONSOLE_LOG_LEVEL, FILE_LOG_LEVEL

class ArrangerLogger:
    """Centralized logging system for the product arranger"""

    def __init__(self, log_dir: Optional[str] = LOG_DIR, console_level: str = CONSOLE_LOG_LEVEL,
                 file_level: str = FILE_LOG_LEVEL):
        # Create logger
        self.logger = logging.getLogger('product_arranger')
        self.logger.setLevel(logging.DEBUG)

        # Remove existing handlers
        self.logger.handlers = []

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, console_level))
        console_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_format)
        self.logger.addHandler(console_handler)

        # File handler, skipped when no directory is configured
        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(exist_ok=True)
            log_file = self.log_dir / f"arranger_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(getattr(logging, file_level))
            file_format = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(module)-15s | %(funcName)-20s | %(message)s'
            )
            file_handler.setFormatter(file_format)
            self.logger.addHandler(file_handler)
            self.logger.debug(f"Logging initialized. Log file: {log_file}")
        else:
            self.log_dir = None

    def get_logger(self):
        return self.logger

# Global logger instance
_logger_instance = None

def get_logger():
    """Get or create logger instance"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = ArrangerLogger()
    return _logger_instance.get_logger()

def configure_logging(log_dir: Optional[str] = LOG_DIR, console_level: str = CONSOLE_LOG_LEVEL,
                      file_level: str = FILE_LOG_LEVEL):
    """Replace the global logger configuration"""
    global _logger_instance
    _logger_instance = ArrangerLogger(log_dir, console_level, file_level)
    return _logger_instance.get_logger()
