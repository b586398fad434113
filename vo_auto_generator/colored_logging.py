"""
Colored logging formatter for VO Auto Generator.

Adds ANSI colors to console log output so that progress, success and error
lines of a generation run stand out.
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter that colors records by level and by message kind.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SPECIAL_COLORS = {
        'success': '\033[92m',    # Bright Green
        'progress': '\033[94m',   # Bright Blue
        'highlight': '\033[96m',  # Bright Cyan
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    SUCCESS_MARK = '✓'
    PROGRESS_MARK = '→'
    HIGHLIGHT_MARK = '•'

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True, stream=None):
        """
        Args:
            fmt: Log format string (uses "LEVEL: message" if None)
            use_colors: Whether to use colors at all
            stream: Stream the handler writes to, checked for TTY support
        """
        if fmt is None:
            fmt = "%(levelname)s: %(message)s"
        super().__init__(fmt)

        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if not self.use_colors:
            return formatted_message

        message = record.getMessage()

        if record.levelname in ('ERROR', 'CRITICAL', 'WARNING'):
            return f"{self.COLORS[record.levelname]}{formatted_message}{self.RESET}"

        if message.startswith(self.SUCCESS_MARK):
            return f"{self.SPECIAL_COLORS['success']}{self.BOLD}{formatted_message}{self.RESET}"
        if message.startswith(self.PROGRESS_MARK):
            return f"{self.SPECIAL_COLORS['progress']}{formatted_message}{self.RESET}"
        if message.startswith(self.HIGHLIGHT_MARK):
            return f"{self.SPECIAL_COLORS['highlight']}{formatted_message}{self.RESET}"
        if self._is_section_message(message):
            return f"{self.BOLD}{self.SPECIAL_COLORS['highlight']}{formatted_message}{self.RESET}"
        if record.levelname == 'DEBUG':
            return f"{self.COLORS['DEBUG']}{formatted_message}{self.RESET}"
        return formatted_message

    @staticmethod
    def _is_section_message(message: str) -> bool:
        return message.strip().startswith('=' * 10)


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Install a single colored console handler on the root logger.

    Args:
        level: Logging level (default: INFO)
        use_colors: Whether to use colors (default: True)
    """
    formatter = ColoredFormatter(use_colors=use_colors, stream=sys.stderr)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def get_colored_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_success(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.SUCCESS_MARK} {message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.PROGRESS_MARK} {message}")


def log_highlight(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.HIGHLIGHT_MARK} {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header framed by separator lines."""
    separator = "=" * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
