"""
Logging configuration for fontfakery.

Provides centralized logging. When an input file is involved (an axis table,
a designspace or a font), log output goes to a 'logs' subdirectory next to
that file. The logs directory is created automatically if it doesn't exist.
Log filename format: fontfakery_{input_name}_{timestamp}.log

Only the 5 most recent log files with the 'fontfakery_' prefix are kept.
Without an input file the logger can be attached to the console only.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "fontfakery"


class FontFakeryLogger:
    """Centralized logger for fontfakery operations."""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    _FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    _DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

    @classmethod
    def _cleanup_old_logs(cls, logs_dir: Path, keep_count: int = 5) -> None:
        """
        Remove old log files, keeping only the most recent ones.

        Args:
            logs_dir: Directory containing log files
            keep_count: Number of most recent log files to keep (default: 5)
        """
        log_files = sorted(
            logs_dir.glob("fontfakery_*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True
        )

        for old_log in log_files[keep_count:]:
            try:
                old_log.unlink()
            except OSError:
                # Another process may hold or have removed the file
                pass

    @classmethod
    def _reset_handlers(cls) -> logging.Logger:
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
        cls._logger = logging.getLogger(LOGGER_NAME)
        cls._current_log_file = None
        return cls._logger

    @classmethod
    def setup_logger(cls, file_path: str, log_level: int = logging.INFO) -> logging.Logger:
        """
        Setup logger for an operation on an input file.

        Args:
            file_path: Path to the input file (axis table, designspace or font)
            log_level: Logging level (default: INFO)

        Returns:
            Configured logger instance
        """
        input_path = Path(file_path)
        base_name = input_path.stem
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:17]

        logs_dir = input_path.parent / "logs"
        logs_dir.mkdir(exist_ok=True)

        log_path = logs_dir / f"fontfakery_{base_name}_{timestamp}.log"

        logger = cls._reset_handlers()
        logger.setLevel(log_level)

        formatter = logging.Formatter(cls._FORMAT, datefmt=cls._DATE_FORMAT)

        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        # Console gets important messages only
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._current_log_file = log_path

        logger.info(f"fontfakery logging started for file: {file_path}")
        logger.info(f"Log file: {log_path}")

        # Done after creating the new log so it's included in the count
        cls._cleanup_old_logs(logs_dir, keep_count=5)

        return logger

    @classmethod
    def setup_console_logger(cls, log_level: int = logging.WARNING) -> logging.Logger:
        """Setup logger that writes to the console only."""
        logger = cls._reset_handlers()
        logger.setLevel(log_level)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(cls._FORMAT, datefmt=cls._DATE_FORMAT))
        logger.addHandler(console_handler)

        return logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the current log file path."""
        return cls._current_log_file

    @classmethod
    def info(cls, message: str) -> None:
        if cls._logger:
            cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        if cls._logger:
            cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        if cls._logger:
            cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        if cls._logger:
            cls._logger.debug(message)

    @classmethod
    def success(cls, message: str) -> None:
        """Log success message (using info level)."""
        if cls._logger:
            cls._logger.info(f"✅ {message}")

    @classmethod
    def cleanup(cls) -> None:
        """Clean up logger resources."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
            cls._logger = None
            cls._current_log_file = None
