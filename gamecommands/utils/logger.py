# file: gamecommands/utils/logger.py

import logging
import sys
import os
import psutil
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Protocol

LOG_FILE_NAME = "gamecommands.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(mem_rss_mb)4.1fMB] - %(message)s (%(filename)s:%(lineno)d)"


class ConfigLoader(Protocol):
    def get_config(self, filename: str) -> dict: ...
    def get_data_dir(self) -> Path: ...


class MemoryLogFilter(logging.Filter):
    """
    Injects current process memory (RSS) into log records.
    """
    def __init__(self):
        super().__init__()
        try:
            self.process = psutil.Process(os.getpid())
        except psutil.NoSuchProcess:
            self.process = None

    def filter(self, record):
        if self.process:
            try:
                mem_info = self.process.memory_info()
                record.mem_rss_mb = mem_info.rss / (1024 * 1024)
            except psutil.Error:
                record.mem_rss_mb = 0.0
        else:
            record.mem_rss_mb = 0.0
        return True


def setup_logging(config_loader: ConfigLoader) -> Path:
    """
    Configures the global logging system.

    Safe to call more than once: handlers are named and only added once.
    Returns the path of the log file.
    """
    log_config = config_loader.get_config("system_config.json").get("logging", {})
    log_level_str = log_config.get("level", "INFO")
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    log_dir = Path(config_loader.get_data_dir()) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    log_format = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    memory_filter = MemoryLogFilter()

    # --- Console Handler ---
    if not any(h.get_name() == "app_console_handler" for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name("app_console_handler")
        console_handler.setLevel(log_level)
        console_handler.setFormatter(log_format)
        console_handler.addFilter(memory_filter)
        logger.addHandler(console_handler)

    # --- Rotating File Handler ---
    if not any(h.get_name() == "app_file_handler" for h in logger.handlers):
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding='utf-8'
        )
        file_handler.set_name("app_file_handler")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(log_format)
        file_handler.addFilter(memory_filter)
        logger.addHandler(file_handler)

    logging.info("--- Logging initialized ---")
    logging.info(f"Log level set to: {log_level_str}")
    logging.info(f"Log files at: {log_file}")
    return log_file
