"""Slash-command parsing and the command catalogue."""

from slashline.commands.parser import (
    CommandResult,
    get_command_args,
    get_command_name,
    is_command,
    parse,
)
from slashline.commands.registry import CommandRegistry, CommandSpec, default_registry

__all__ = [
    "CommandResult",
    "parse",
    "is_command",
    "get_command_name",
    "get_command_args",
    "CommandRegistry",
    "CommandSpec",
    "default_registry",
]
