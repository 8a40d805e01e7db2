"""
Author lookup through the local git configuration.
"""

from __future__ import annotations

import logging
import subprocess

from ..errors import AuthorResolutionError

logger = logging.getLogger(__name__)


def resolve_git_author(executable: str = "git") -> str:
    """
    Return ``git config user.name`` exactly as printed, trailing newline included.

    Args:
        executable: git command to invoke.

    Raises:
        AuthorResolutionError: If git is missing or no user name is configured.
    """
    cmd = [executable, "config", "user.name"]
    logger.debug("Resolving author with %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, errors="surrogateescape", check=True)
    except FileNotFoundError as exc:
        raise AuthorResolutionError(
            f"unable to get git config author name with error '{executable} not found'"
        ) from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or str(exc)
        raise AuthorResolutionError(f"unable to get git config author name with error '{detail}'") from exc
    except OSError as exc:
        raise AuthorResolutionError(f"unable to get git config author name with error '{exc}'") from exc
    logger.info("Resolved author %r", result.stdout)
    return result.stdout
