"""Exception hierarchy for project scaffolding."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for scaffolding errors."""
    pass


class ProjectExistsError(ScaffoldError):
    """Target directory is already present on disk."""

    def __init__(self, project_path: Path):
        self.project_path = project_path
        super().__init__(f'Directory "{project_path.name}" already exists')


class ProjectCancelledError(ScaffoldError):
    """User declined to answer the required project name question."""

    def __init__(self) -> None:
        super().__init__("Project creation cancelled")


class TemplateNotFoundError(ScaffoldError):
    """Bundled or overridden template directory is missing."""

    def __init__(self, template_dir: Path):
        self.template_dir = template_dir
        super().__init__(f"Template directory not found at {template_dir}")


class ManifestError(ScaffoldError):
    """package.json could not be read, parsed or rewritten.

    The original exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, manifest_path: Path, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Cannot update {manifest_path.name}: {reason}")


__all__ = [
    "ManifestError",
    "ProjectCancelledError",
    "ProjectExistsError",
    "ScaffoldError",
    "TemplateNotFoundError",
]
