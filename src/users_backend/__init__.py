"""Users backend package wiring."""

from users_backend.settings import BackendSettings, get_settings

__all__ = ["BackendSettings", "get_settings"]
