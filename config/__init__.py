"""
Config package - Dashboard settings.

Usage:
    from config import get_config

    config = get_config()
    print(config.players_endpoint)
"""

from config.dashboard_config import DashboardConfig, get_config

__all__ = [
    "DashboardConfig",
    "get_config",
]
