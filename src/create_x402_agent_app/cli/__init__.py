"""CLI helpers exposed for other modules."""

from .prompts import ConsolePrompter, Prompter, collect_project_options
from .ui import StepTracker, select_with_arrows

__all__ = ["ConsolePrompter", "Prompter", "StepTracker", "collect_project_options", "select_with_arrows"]
