"""Configuration module for managing client settings."""

from config.settings import (
    WiiloadConfig,
    Config,
)

__all__ = [
    'WiiloadConfig',
    'Config',
]
