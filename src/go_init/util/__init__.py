"""
Shared utility helpers for filesystem, git and time lookups.
"""

from .filesystem import make_directory, write_text_file
from .git import resolve_git_author
from .time import current_year

__all__ = [
    "make_directory",
    "write_text_file",
    "resolve_git_author",
    "current_year",
]
