"""
Logging package - Universal dashboard logger.

Usage:
    from src.logging import get_logger
    
    logger = get_logger()
    logger.info("Fetching players...")
    logger.success("Completed!")
"""

from src.logging.logger import get_logger, reset_logger, DashboardLogger, ScreenLogger

__all__ = [
    "get_logger",
    "reset_logger",
    "DashboardLogger",
    "ScreenLogger",
]
