"""
Wall-clock helpers.
"""

from __future__ import annotations

from datetime import datetime


def current_year() -> int:
    """Return the current local calendar year."""
    return datetime.now().year
