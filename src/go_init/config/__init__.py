"""
Configuration helpers for go-init.
"""

from .models import ProjectContext
from .settings import Settings, get_settings

__all__ = ["ProjectContext", "Settings", "get_settings"]
