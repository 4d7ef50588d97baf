"""
Configuration for the isthmus service.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
