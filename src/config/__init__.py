from .settings import Settings, get_settings
from .logging_setup import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
