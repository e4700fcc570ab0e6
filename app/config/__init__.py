"""
Configuration package.

This package provides library configuration management
via Settings class loaded from environment variables.
"""

from .settings import Settings

__all__ = ['Settings']
