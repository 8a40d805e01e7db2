"""
Pydantic model for the values interpolated into every generated file.
"""

from __future__ import annotations

from pydantic import BaseModel


class ProjectContext(BaseModel):
    """
    Inputs captured once at the start of a run.

    Attributes:
        directory: Name of the project directory, also used as the binary name.
        organization: GitHub organization hosting the project.
        author: Author name exactly as reported by git (trailing newline kept).
        year: Copyright year.
    """
    directory: str
    organization: str
    author: str
    year: int

    model_config = {
        "frozen": True,
    }
