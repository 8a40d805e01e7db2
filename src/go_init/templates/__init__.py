"""
Template renderers keyed by logical name.

Every renderer in ``TEMPLATES`` takes a ``ProjectContext`` and returns the
complete file content; the per-file functions they wrap only receive the values
they interpolate.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..config.models import ProjectContext
from . import documents, scripts

Renderer = Callable[[ProjectContext], str]

TEMPLATES: Dict[str, Renderer] = {
    "readme": lambda ctx: documents.render_readme(ctx.year, ctx.directory, ctx.author, ctx.organization),
    "license": lambda ctx: documents.render_license(ctx.year, ctx.author),
    "main": lambda ctx: documents.render_main(ctx.year, ctx.directory, ctx.author),
    "main_test": lambda ctx: documents.render_main_test(ctx.year, ctx.author),
    "gitignore": lambda ctx: documents.render_gitignore(),
    "go_mod": lambda ctx: documents.render_go_mod(ctx.organization, ctx.directory),
    "all": lambda ctx: scripts.render_all_script(),
    "bootstrap": lambda ctx: scripts.render_bootstrap_script(),
    "build": lambda ctx: scripts.render_build_script(ctx.directory),
    "cibuild": lambda ctx: scripts.render_cibuild_script(),
    "clean": lambda ctx: scripts.render_clean_script(),
    "cover_html": lambda ctx: scripts.render_cover_html_script(),
    "install": lambda ctx: scripts.render_install_script(ctx.organization, ctx.directory),
    "lint": lambda ctx: scripts.render_lint_script(),
    "package": lambda ctx: scripts.render_package_script(ctx.directory),
    "setup": lambda ctx: scripts.render_setup_script(),
    "test": lambda ctx: scripts.render_test_script(),
    "update": lambda ctx: scripts.render_update_script(),
}


def render_template(name: str, context: ProjectContext) -> str:
    """
    Render the template registered under ``name``.

    Raises:
        KeyError: If no template is registered under that name.
    """
    return TEMPLATES[name](context)


__all__ = ["Renderer", "TEMPLATES", "render_template", "documents", "scripts"]
