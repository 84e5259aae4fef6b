"""
Pydantic models for the spelling system.

This module provides:
- SpellingConfig: Key and preferences used to spell pitch classes
"""

from tonality.models.config import SpellingConfig

__all__ = [
    "SpellingConfig",
]
