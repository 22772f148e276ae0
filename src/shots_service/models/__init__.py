"""
Service Models Package

This package contains the Pydantic models used throughout the service.
"""

from .shot import Shot, shots_from_items

__all__ = [
    "Shot",
    "shots_from_items",
]
