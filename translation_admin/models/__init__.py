"""Database models for the translation admin."""

from .trans_unit import TransUnit
from .translation import Translation

__all__ = ['TransUnit', 'Translation']
