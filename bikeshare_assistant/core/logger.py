"""
Centralized logging configuration for the application.
Logs to both console and rotating file.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from datetime import datetime
from typing import Union

from bikeshare_assistant.core.config import settings


def resolve_level(level: Union[str, int]) -> int:
    """Turn a level name such as "debug" or "INFO" into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logger(
    name: str = "bikeshare_assistant",
    level: Union[str, int] = "INFO",
    log_dir: Union[str, Path] = "logs"
) -> logging.Logger:
    """
    Setup and configure application logger.
    
    Args:
        name: Logger name
        level: Verbosity for the logger and its console handler
        log_dir: Directory for the rotating log file
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    # Avoid duplicate handlers
    if logger.handlers:
        return logger
    
    level = resolve_level(level)
    logger.setLevel(level)
    
    # Formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    # File handler (rotating, max 10MB per file, keep 5 backups)
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"bikeshare_assistant_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    
    return logger


# Create default logger instance
logger = setup_logger(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)


def log_request(endpoint: str, method: str, intent: str = "unknown"):
    """Log incoming request"""
    logger.info(f"Request: {method} {endpoint} - Intent: {intent}")


def log_success(endpoint: str, message: str, intent: str = "unknown"):
    """Log successful operation"""
    logger.info(f"Success: {endpoint} - {message} - Intent: {intent}")


def log_error(endpoint: str, error: Exception, intent: str = "unknown"):
    """Log error with full traceback"""
    logger.error(f"Error: {endpoint} - Intent: {intent} - {type(error).__name__}: {str(error)}", exc_info=True)


def log_warning(endpoint: str, message: str, intent: str = "unknown"):
    """Log warning"""
    logger.warning(f"Warning: {endpoint} - {message} - Intent: {intent}")


def log_provider_request(contract: str, success: bool, stations: int = 0, error: str = ""):
    """Log bike-share provider API requests"""
    if success:
        logger.debug(f"Provider Request: Contract {contract} - {stations} stations fetched")
    else:
        logger.error(f"Provider Request: Contract {contract} - Failed: {error}")
