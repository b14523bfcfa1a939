"""Recursive copy with path-fragment exclusion."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .config import NO_EXCLUSIONS, ExclusionRules

logger = logging.getLogger(__name__)


def is_excluded(relative_path: str | Path, rules: ExclusionRules) -> bool:
    """Return True when ``relative_path`` (relative to the copy root) matches a rule."""
    if isinstance(relative_path, Path):
        relative_path = relative_path.as_posix()
    return rules.matches(relative_path)


def copy_tree(
    source: Path,
    dest: Path,
    rules: ExclusionRules = NO_EXCLUSIONS,
    skip: Path | None = None,
) -> list[Path]:
    """Copy ``source`` into ``dest`` skipping every path matched by ``rules``.

    Excluded directories are never entered. Files are copied whole and
    overwrite existing destination files. Any ``OSError`` aborts the copy.

    Args:
        source: Existing directory to copy from
        dest: Destination directory, created with parents if missing
        rules: Exclusion rule set; the default copies everything
        skip: One exact path under ``source`` left out of the copy, along
            with everything beneath it. Unlike ``rules`` it is not a
            fragment match.

    Returns:
        Destination paths of every copied file, in walk order

    Raises:
        FileNotFoundError: If ``source`` does not exist
        NotADirectoryError: If ``source`` is not a directory
    """
    source = Path(source)
    dest = Path(dest)
    if not source.exists():
        raise FileNotFoundError(f"Source directory not found at {source}")
    if not source.is_dir():
        raise NotADirectoryError(f"Source is not a directory: {source}")

    copied: list[Path] = []
    _copy_dir(source, dest, source, rules, copied, skip)
    logger.debug("Copied %d file(s) from %s to %s", len(copied), source, dest)
    return copied


def _copy_dir(
    current: Path,
    dest: Path,
    root: Path,
    rules: ExclusionRules,
    copied: list[Path],
    skip: Path | None = None,
) -> None:
    dest.mkdir(parents=True, exist_ok=True)

    for child in sorted(current.iterdir(), key=lambda p: p.name):
        if skip is not None and child == skip:
            logger.debug("Skipped %s", child)
            continue
        relative = child.relative_to(root).as_posix()
        if rules.matches(relative):
            logger.debug("Excluded %s", relative)
            continue

        target = dest / child.name
        if child.is_dir():
            _copy_dir(child, target, root, rules, copied, skip)
        elif child.is_file():
            shutil.copy2(child, target)
            copied.append(target)
        else:
            logger.debug("Skipped %s (not a regular file or directory)", relative)


def reset_directory(path: Path) -> None:
    """Remove ``path`` recursively if present, then recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


__all__ = ["copy_tree", "is_excluded", "reset_directory"]
