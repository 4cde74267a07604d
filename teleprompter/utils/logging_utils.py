"""
Logging configuration for the teleprompter service.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List


def setup_logging(
    service_name: str,
    log_file: str,
    log_level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
    log_to_file: bool = True
) -> logging.Logger:
    """
    Configure logging with a console handler and an optional rotating file handler.
    
    Args:
        service_name: Name of the service for logger
        log_file: Name of the log file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files
        max_bytes: Maximum size of log file before rotation (default 10MB)
        backup_count: Number of backup files to keep (default 3)
        log_to_file: Whether to write to the log file at all (default True)
        
    Returns:
        Configured logger instance
    """
    handlers: List[logging.Handler] = [
        logging.StreamHandler(),  # Console output
    ]

    log_file_path = None
    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file_path = log_path / log_file
        handlers.append(
            RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
        )

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True  # Force reconfiguration if already configured
    )

    logger = logging.getLogger(service_name)
    logger.info(f"Logging initialized for {service_name} at level {log_level}")
    if log_file_path:
        logger.info(f"Log file: {log_file_path}")

    return logger
