"""Core utilities and configuration exports."""

from .commands import CommandResult, CommandRunner, SubprocessRunner, run_sequence
from .config import (
    DEFAULT_EXCLUDE_RULES,
    DEFAULT_GITIGNORE,
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_PROJECT_NAME,
    ENV_FILE_TEMPLATE,
    NO_EXCLUSIONS,
    PACKAGE_MANAGER_CHOICES,
    ExclusionRules,
    ProjectOptions,
)
from .filesystem import copy_tree, is_excluded, reset_directory
from .manifest import update_manifest_name
from .templates import get_template_dir
from .validation import is_valid_project_name, validate_project_name

__all__ = [
    "CommandResult",
    "CommandRunner",
    "DEFAULT_EXCLUDE_RULES",
    "DEFAULT_GITIGNORE",
    "DEFAULT_PACKAGE_MANAGER",
    "DEFAULT_PROJECT_NAME",
    "ENV_FILE_TEMPLATE",
    "ExclusionRules",
    "NO_EXCLUSIONS",
    "PACKAGE_MANAGER_CHOICES",
    "ProjectOptions",
    "SubprocessRunner",
    "copy_tree",
    "get_template_dir",
    "is_excluded",
    "is_valid_project_name",
    "reset_directory",
    "run_sequence",
    "update_manifest_name",
    "validate_project_name",
]
