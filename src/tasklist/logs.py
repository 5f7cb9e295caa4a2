import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "tasklist" / "logs"

def setup_logging(log_dir=DEFAULT_LOG_DIR):
    """Set up logging configuration for the tasklist package with environment-based levels."""
    # Determine log level from environment
    env_level = os.getenv('TASKLIST_LOG_LEVEL', '').upper()
    is_debug = os.getenv('TASKLIST_DEBUG', '').lower() in ('1', 'true', 'yes')

    # Default to WARNING so the interactive prompts stay readable
    if is_debug:
        level = logging.DEBUG
    elif env_level:
        level = getattr(logging, env_level, logging.WARNING)
    else:
        level = logging.WARNING

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    # Console handler goes to stderr, stdout belongs to the prompts
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger('tasklist')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.propagate = False

    # File handler (always detailed), skipped when the directory is not writable
    log_dir = Path(log_dir).expanduser()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "tasklist.log", encoding="utf-8")
    except OSError as e:
        logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")
    else:
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'tasklist.{name}')
    return logging.getLogger('tasklist')
