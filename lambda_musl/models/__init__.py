"""Models for lambda-musl."""

from .config import BuildConfig, Command

__all__ = [
    'BuildConfig',
    'Command',
]
