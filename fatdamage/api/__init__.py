"""
API routes package.

Exports all API routers for easy inclusion in the main application.
"""
from fatdamage.api import rainflow, damage

__all__ = [
    "rainflow",
    "damage"
]
