"""
Logging configuration for the card scanner.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        """Format log record with colors."""
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Color a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{log_color}{record.levelname}{reset_color}"

        return super().format(record)


def setup_logger(
    name: str = "card_scanner",
    level: str = "INFO",
    log_dir: Optional[str] = "logs"
) -> logging.Logger:
    """
    Configure logger with console and file handlers.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for card_scanner.log; no file handler when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Console handler with colors
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_formatter = ColoredFormatter(
        '%(asctime)s [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / "card_scanner.log", encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def log_progress(logger: logging.Logger, progress, source: str = "Processing"):
    """
    Log page progress for one file.

    Args:
        logger: Logger instance
        progress: ProcessingProgress with current and total pages
        source: File name shown before the counts
    """
    logger.info(f"{source}: page {progress.current}/{progress.total} ({progress.percentage:.1f}%)")


def log_stats(logger: logging.Logger, stats_dict: Dict[str, Any], title: str = "Statistics"):
    """
    Log statistics dictionary.

    Args:
        logger: Logger instance
        stats_dict: Dictionary of statistics; (count, total) pairs are shown
            as a share of the total
        title: Section title
    """
    logger.info(f"=== {title} ===")
    for key, value in stats_dict.items():
        if isinstance(value, tuple):
            count, total = value
            share = count / total * 100 if total > 0 else 0.0
            logger.info(f"  {key}: {count}/{total} ({share:.1f}%)")
        elif isinstance(value, float):
            logger.info(f"  {key}: {value:.2f}")
        else:
            logger.info(f"  {key}: {value}")
    logger.info("=" * (len(title) + 8))


def log_file_result(logger: logging.Logger, result):
    """
    Log the outcome of one scanned file.

    Args:
        logger: Logger instance
        result: ProcessingResult for the file
    """
    pages = f"{result.pages_processed}/{result.total_pages} pages"
    if result.error is None:
        logger.info(f"Finished {result.source}: {result.contacts_added} contacts from {pages}")
    else:
        logger.warning(
            f"Stopped {result.source} after {pages}: {result.contacts_added} contacts kept "
            f"({type(result.error).__name__}: {result.error})"
        )
