"""package.json name patching."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from create_x402_agent_app.errors import ManifestError

from .config import MANIFEST_FILENAME

logger = logging.getLogger(__name__)


def update_manifest_name(project_path: Path, project_name: str) -> Path:
    """Set ``name`` in the project's package.json, keeping every other key and its order.

    Returns:
        Path of the rewritten manifest

    Raises:
        ManifestError: If the manifest is missing, not UTF-8, not a JSON
            object, or cannot be read or written back
    """
    manifest_path = project_path / MANIFEST_FILENAME
    if not manifest_path.is_file():
        raise ManifestError(manifest_path, "file not found")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(manifest_path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(manifest_path, f"not valid UTF-8 (byte {exc.start})") from exc
    except OSError as exc:
        raise ManifestError(manifest_path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestError(manifest_path, "top-level value is not an object")

    previous = data.get("name")
    data["name"] = project_name

    try:
        manifest_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ManifestError(manifest_path, str(exc)) from exc

    logger.debug("Renamed manifest %s -> %s", previous, project_name)
    return manifest_path


__all__ = ["update_manifest_name"]
