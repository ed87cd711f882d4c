"""
Logging setup for the IPFS storage plugin.

Everything logs under the ``ipfs_storage`` root logger. Console output is
colored with colorlog; a plain file handler is optional since the plugin
usually runs inside a host application that owns its own log files.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

ROOT_LOGGER_NAME = "ipfs_storage"


class PluginLogger:
    """
    Installs handlers on the ``ipfs_storage`` logger once per process.

    The first get_logger() call installs the colored console handler, so
    the plugin logs upload CIDs, store receipts and lookup results even when
    the host never calls setup_logging().
    """

    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def setup(
        cls,
        level: int = logging.INFO,
        log_dir: Optional[str] = None,
        log_to_file: bool = False,
    ):
        """
        Configure the plugin's root logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_dir: Directory for the log file. If None, uses ./logs
            log_to_file: Whether to also write ipfs_storage.log
        """
        if cls._initialized:
            return

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        console_handler = colorlog.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s%(asctime)s [%(name)s] %(levelname)-8s%(reset)s %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )
        )
        root_logger.addHandler(console_handler)

        if log_to_file:
            cls._log_dir = Path(log_dir) if log_dir else Path("logs")
            cls._log_dir.mkdir(exist_ok=True, parents=True)
            file_handler = logging.FileHandler(cls._log_dir / "ipfs_storage.log")
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] %(levelname)-8s %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a plugin subsystem.

        Args:
            name: Subsystem name (e.g. 'plugin', 'ipfs', 'registry')

        Returns:
            Logger instance
        """
        if not cls._initialized:
            cls.setup()

        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    @classmethod
    def reset(cls):
        """Close installed handlers so setup() can run again."""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers.clear()
        cls._initialized = False
        cls._log_dir = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a plugin subsystem"""
    return PluginLogger.get_logger(name)


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    log_to_file: bool = False,
):
    """
    Configure plugin logging before any plugin logger is requested.

    Has no effect once handlers are installed; call PluginLogger.reset()
    first to change the level or add the file log later.
    """
    PluginLogger.setup(level=level, log_dir=log_dir, log_to_file=log_to_file)
