"""Configuration module for environment-driven simulation settings."""

from config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
