from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PLAYERS_ENDPOINT = "https://trivia-backend-one.onrender.com/api/players/all"

_config_instance: Optional["DashboardConfig"] = None


@dataclass
class DashboardConfig:
    """Configuration for the trivia dashboard."""
    players_endpoint: str = DEFAULT_PLAYERS_ENDPOINT
    request_timeout: float = 10.0
    score_placeholder: str = "N/A"
    treat_zero_score_as_missing: bool = True
    csv_quote_fields: bool = False
    export_dir: str = "exports"
    log_dir: str = "logs"
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path = "config/dashboard_config.json") -> "DashboardConfig":
        """Load config from a JSON file, then apply environment overrides."""
        config_path = Path(path)
        if not config_path.exists():
            print(f"⚠️  Config file not found at {config_path}, using defaults")
            config = cls()
        else:
            with open(config_path) as f:
                data = json.load(f)
            config = cls(**data)

        return config.with_env_overrides()

    def with_env_overrides(self) -> "DashboardConfig":
        """Apply TRIVIA_* environment variables on top of this config."""
        endpoint = os.getenv("TRIVIA_PLAYERS_ENDPOINT", "").strip()
        if endpoint:
            self.players_endpoint = endpoint

        timeout = os.getenv("TRIVIA_REQUEST_TIMEOUT", "").strip()
        if timeout:
            self.request_timeout = float(timeout)

        export_dir = os.getenv("TRIVIA_EXPORT_DIR", "").strip()
        if export_dir:
            self.export_dir = export_dir

        log_dir = os.getenv("TRIVIA_LOG_DIR", "").strip()
        if log_dir:
            self.log_dir = log_dir

        verbose = os.getenv("TRIVIA_VERBOSE", "").strip().lower()
        if verbose:
            self.verbose = verbose in ("1", "true", "yes", "on")

        return self


def get_config() -> DashboardConfig:
    """Get the global config instance. Loads it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = DashboardConfig.from_file()
    return _config_instance
