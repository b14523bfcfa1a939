"""CLI command modules for create-x402-agent-app."""

from .create import register_create_command
from .prepare import register_prepare_command

__all__ = ["register_create_command", "register_prepare_command"]
