"""Template staging: snapshot a parent project into the bundled template directory.

Run by maintainers before publishing. The staging directory is wiped and
refilled on every run, so stale files never survive between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from create_x402_agent_app.core.config import (
    DEFAULT_EXCLUDE_RULES,
    DEFAULT_GITIGNORE,
    GITIGNORE_FILENAME,
    ExclusionRules,
)
from create_x402_agent_app.core.filesystem import copy_tree, reset_directory

logger = logging.getLogger(__name__)


@dataclass
class PrepareResult:
    template_dir: Path
    copied: list[Path] = field(default_factory=list)
    gitignore_created: bool = False


def _is_relative_to(path: Path, other: Path) -> bool:
    try:
        path.relative_to(other)
    except ValueError:
        return False
    return True


def prepare_template(
    project_root: Path,
    template_dir: Path,
    rules: ExclusionRules = DEFAULT_EXCLUDE_RULES,
    gitignore_content: str = DEFAULT_GITIGNORE,
) -> PrepareResult:
    """Rebuild ``template_dir`` from ``project_root``.

    Args:
        project_root: Parent project to snapshot
        template_dir: Staging directory, deleted and recreated first
        rules: Paths to leave out of the snapshot
        gitignore_content: Written when the snapshot has no .gitignore

    Returns:
        PrepareResult with the copied files

    Raises:
        FileNotFoundError: If ``project_root`` does not exist
        ValueError: If ``template_dir`` is ``project_root`` or one of its
            ancestors, which would delete the source
    """
    project_root = project_root.resolve()
    template_dir = template_dir.resolve()

    if not project_root.is_dir():
        raise FileNotFoundError(f"Project root not found at {project_root}")
    if _is_relative_to(project_root, template_dir):
        raise ValueError(f"Template directory {template_dir} must not contain the project root {project_root}")

    reset_directory(template_dir)
    logger.debug("Reset template directory %s", template_dir)

    result = PrepareResult(template_dir=template_dir)
    # the staging directory may sit inside the project root
    result.copied = copy_tree(project_root, template_dir, rules, skip=template_dir)

    gitignore_path = template_dir / GITIGNORE_FILENAME
    if not gitignore_path.exists():
        gitignore_path.write_text(gitignore_content, encoding="utf-8")
        result.gitignore_created = True

    return result


__all__ = ["PrepareResult", "prepare_template"]
