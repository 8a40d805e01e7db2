"""
Create the directory tree and write every generated file for a new Go project.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..config import ProjectContext
from ..errors import DirectoryCreationError, FileWriteError
from ..templates import render_template
from ..util import current_year, make_directory, resolve_git_author, write_text_file

logger = logging.getLogger(__name__)

SCRIPTS_DIRNAME = "scripts"
BIN_DIRNAME = "bin"
DIRECTORY_MODE = 0o755
DOCUMENT_MODE = 0o644
SCRIPT_MODE = 0o755

# (file name, template name), in write order
DOCUMENT_TARGETS = (
    ("README.md", "readme"),
    ("LICENSE", "license"),
    ("main.go", "main"),
    ("main_test.go", "main_test"),
    (".gitignore", "gitignore"),
    ("go.mod", "go_mod"),
)
SCRIPT_TARGETS = (
    ("all", "all"),
    ("bootstrap", "bootstrap"),
    ("build", "build"),
    ("cibuild", "cibuild"),
    ("clean", "clean"),
    ("cover-html", "cover_html"),
    ("install.sh", "install"),
    ("lint", "lint"),
    ("package", "package"),
    ("setup", "setup"),
    ("test", "test"),
    ("update", "update"),
)


@dataclass(frozen=True)
class GenerationTask:
    """
    One file to generate.

    Attributes:
        path: Destination of the rendered content.
        mode: Permission bits applied to the written file.
        producer: Zero-argument callable returning the file content.
    """
    path: Path
    mode: int
    producer: Callable[[], str]


@dataclass
class ScaffoldReport:
    """
    Stores what a scaffolding run created.

    Attributes:
        root: The project directory.
        directories_created: Directories created, in creation order.
        files_written: Files written, in task order.
    """
    root: Path
    directories_created: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Files written", str(len(self.files_written)))


def resolve_project_root(context: ProjectContext, base_dir: Optional[Path | str] = None) -> Path:
    """
    Return the project directory path, relative to ``base_dir`` when given.
    """
    if base_dir is None:
        return Path(context.directory)
    return Path(base_dir) / context.directory


def create_directories(root: Path) -> List[Path]:
    """
    Create the project directory and its ``scripts`` and ``bin`` subdirectories.

    Directories created before a failure are left on disk.

    Raises:
        DirectoryCreationError: If any directory exists already or cannot be created.
    """
    created: List[Path] = []
    for path in (root, root / SCRIPTS_DIRNAME, root / BIN_DIRNAME):
        try:
            make_directory(path, mode=DIRECTORY_MODE)
        except OSError as exc:
            raise DirectoryCreationError(f"unable to create dir '{path}' with error '{exc}'") from exc
        created.append(path)
    return created


def build_tasks(context: ProjectContext, root: Path) -> List[GenerationTask]:
    """
    Assemble the fixed, ordered list of files to generate under ``root``.
    """
    tasks = [
        GenerationTask(root / filename, DOCUMENT_MODE, partial(render_template, name, context))
        for filename, name in DOCUMENT_TARGETS
    ]
    scripts_dir = root / SCRIPTS_DIRNAME
    tasks.extend(
        GenerationTask(scripts_dir / filename, SCRIPT_MODE, partial(render_template, name, context))
        for filename, name in SCRIPT_TARGETS
    )
    return tasks


def run_tasks(tasks: Iterable[GenerationTask]) -> List[Path]:
    """
    Render and write each task in order, stopping at the first failure.

    Raises:
        FileWriteError: If a file cannot be written; earlier files are kept.
    """
    written: List[Path] = []
    for task in tasks:
        try:
            write_text_file(task.path, task.producer(), mode=task.mode)
        except (OSError, UnicodeError) as exc:
            raise FileWriteError(f"failure writing '{task.path}' with error '{exc}'") from exc
        written.append(task.path)
    return written


def create_project(context: ProjectContext, *, base_dir: Optional[Path | str] = None) -> ScaffoldReport:
    """
    Create the directory tree for ``context`` and write every generated file.

    Args:
        context: Values interpolated into the templates.
        base_dir: Parent of the new project directory (defaults to the working directory).

    Returns:
        A ScaffoldReport detailing what was created.
    """
    root = resolve_project_root(context, base_dir)
    report = ScaffoldReport(root=root)
    report.directories_created.extend(create_directories(root))
    tasks = build_tasks(context, root)
    logger.info("Writing %d files under %s", len(tasks), root)
    report.files_written.extend(run_tasks(tasks))
    return report


def scaffold_project(
    directory: str,
    organization: str,
    *,
    base_dir: Optional[Path | str] = None,
    author: Optional[str] = None,
    year: Optional[int] = None,
    git_executable: str = "git",
) -> ScaffoldReport:
    """
    Resolve the author and year, then create the project.

    The author is looked up before anything touches the filesystem, so a missing
    git configuration leaves no directories behind.

    Args:
        directory: Name of the new project directory.
        organization: GitHub organization for the module path.
        base_dir: Parent of the new project directory.
        author: Author override; looked up from git when omitted.
        year: Copyright year override; the current year when omitted.
        git_executable: git command used for the author lookup.

    Raises:
        AuthorResolutionError: If the author lookup fails.
        DirectoryCreationError: If the project tree cannot be created.
        FileWriteError: If a generated file cannot be written.
    """
    if year is None:
        year = current_year()
    if author is None:
        author = resolve_git_author(git_executable)
    context = ProjectContext(directory=directory, organization=organization, author=author, year=year)
    return create_project(context, base_dir=base_dir)
