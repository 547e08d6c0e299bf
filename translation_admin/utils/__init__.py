"""Shared utilities for the translation admin.

This package contains configuration, CSRF and error handling helpers
shared by the application factory and the routes.
"""

from translation_admin.utils.config import GridConfig
from translation_admin.utils.csrf import generate_csrf_token, check_csrf

__all__ = [
    'GridConfig',
    'generate_csrf_token',
    'check_csrf',
]
