"""
Risky Dice Configuration.

Environment variables, settings, and logging configuration.
"""

from src.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
