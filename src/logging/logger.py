import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from config.dashboard_config import get_config
from src.utils.run_id import get_run_id

if TYPE_CHECKING:
    from src.models.date_range import DateRange
    from src.services.export import ExportFile

_logger_instance: Optional['DashboardLogger'] = None


def get_logger() -> 'DashboardLogger':
    """Get the global logger instance. Creates one if needed."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DashboardLogger()
    return _logger_instance


def reset_logger() -> None:
    """Drop the global logger so the next get_logger() builds a fresh one."""
    global _logger_instance
    if _logger_instance is not None:
        for handler in list(_logger_instance.logger.handlers):
            handler.close()
        _logger_instance.logger.handlers.clear()
    _logger_instance = None


class DashboardLogger:
    """Universal logger - no configuration needed."""

    def __init__(self):
        self.run_id = get_run_id()
        self.config = get_config()

        self.logger = logging.getLogger(f"trivia_dashboard.{self.run_id}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.logger.handlers.clear()

        # File handler - always logs everything
        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = log_dir / f"{self.run_id}.log"
        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        if self.config.verbose:
            file_handler.setLevel(logging.DEBUG)
        else:
            file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(console_handler)

        self.fetch_count: int = 0
        self.export_count: int = 0

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def section(self, title: str):
        """Section header with dividers."""
        self.logger.info(f"\n{'='*60}")
        self.logger.info(title)
        self.logger.info(f"{'='*60}\n")

    # ─── Fetcher ───────────────────────────────────────────────────

    def fetch_started(self, endpoint: str):
        self.fetch_count += 1
        self.info(f"🌐 Fetching: {endpoint}")

    def fetch_succeeded(self, endpoint: str, field: str, size: int, elapsed_ms: float):
        self.success(f"Fetched '{field}' from {endpoint} ({size}) in {elapsed_ms:.0f}ms")

    def fetch_failed(self, endpoint: str, kind: str, reason: str):
        self.error(f"Fetch failed [{kind}] {endpoint}: {reason}")

    # ─── Filter / Export ───────────────────────────────────────────

    def filter_applied(self, date_range: 'DateRange', kept: int, total: int):
        self.debug(f"📋 Filter {date_range.describe()}: {kept} of {total} players")

    def export_written(self, export_file: 'ExportFile', rows: int):
        self.export_count += 1
        self.success(f"Exported {rows} players to {export_file.filename} ({len(export_file.content)} bytes)")

    def export_skipped(self):
        self.warning("Nothing to export - filtered player list is empty")

    def session_summary(self):
        """Log a one-block summary of this run."""
        msg = f"""
Trivia Dashboard Session

Run ID: {self.run_id}
Fetches: {self.fetch_count}
Exports: {self.export_count}
Log file: {self.log_file}
Finished: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}
"""
        self.section(msg)


class ScreenLogger:
    """Logger for a single dashboard screen."""

    def __init__(self, screen: str):
        self.screen = screen
        self.logger = get_logger()

    def info(self, msg: str):
        """Screen info message."""
        self.logger.info(f"[{self.screen}] {msg}")

    def error(self, msg: str):
        """Screen error message."""
        self.logger.error(f"[{self.screen}] {msg}")
