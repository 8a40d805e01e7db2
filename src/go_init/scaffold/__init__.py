"""
Project scaffolding: directory creation, task assembly and file generation.
"""

from .generator import (
    GenerationTask,
    ScaffoldReport,
    build_tasks,
    create_directories,
    create_project,
    run_tasks,
    scaffold_project,
)

__all__ = [
    "GenerationTask",
    "ScaffoldReport",
    "build_tasks",
    "create_directories",
    "create_project",
    "run_tasks",
    "scaffold_project",
]
