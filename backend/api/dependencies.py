"""Shared dependencies for API routes."""

from config import settings


def get_match_strength_mode() -> str:
    return settings.match_strength_mode
