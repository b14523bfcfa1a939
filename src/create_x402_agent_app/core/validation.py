"""Project name validation."""

from __future__ import annotations

import re

PROJECT_NAME_PATTERN = re.compile(r"[a-z0-9_-]+")


def validate_project_name(value: str | None) -> str | None:
    """Return an error message for ``value``, or None when it is a usable name."""
    if not value:
        return "Project name is required"
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return "Project name can only contain lowercase letters, numbers, hyphens, and underscores"
    return None


def is_valid_project_name(value: str | None) -> bool:
    return validate_project_name(value) is None


__all__ = ["PROJECT_NAME_PATTERN", "is_valid_project_name", "validate_project_name"]
