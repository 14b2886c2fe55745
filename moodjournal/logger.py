import logging
import os
from logging.handlers import RotatingFileHandler

from .config import LOG_DIR, LOG_LEVEL, LOG_CONSOLE_LEVEL

LOG_FILE = os.path.join(LOG_DIR, "moodjournal.log")
MAX_LOG_SIZE = 2 * 1024 * 1024  # 2MB
BACKUP_COUNT = 2

def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default

def _configure() -> logging.Logger:
    root = logging.getLogger("moodjournal")
    if root.handlers:
        return root  # already configured

    root.setLevel(_level(LOG_LEVEL, logging.INFO))
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    os.makedirs(LOG_DIR, exist_ok=True)
    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT,
                                       encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    # Console has its own threshold
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    console_handler.setLevel(_level(LOG_CONSOLE_LEVEL, logging.WARNING))
    root.addHandler(console_handler)
    return root

logger = _configure()

def get_logger(name):
    return logging.getLogger(f"moodjournal.{name}")
