"""
Exceptions raised while scaffolding a project.
"""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for every fatal scaffolding failure."""


class DirectoryCreationError(ScaffoldError):
    """Raised when the project directory or one of its subdirectories cannot be created."""


class AuthorResolutionError(ScaffoldError):
    """Raised when the author name cannot be read from git."""


class FileWriteError(ScaffoldError):
    """Raised when a generated file cannot be written."""


__all__ = ["ScaffoldError", "DirectoryCreationError", "AuthorResolutionError", "FileWriteError"]
