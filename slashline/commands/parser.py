"""Parser for slash commands typed into the chat box."""

from dataclasses import dataclass
from typing import Optional, Tuple

COMMAND_PREFIX = "/"

NOT_A_COMMAND = "Input must start with '/' to be a command"
NO_COMMAND = "No command specified"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of parsing one line of input."""

    command: str = ""
    args: Tuple[str, ...] = ()
    is_valid: bool = False
    error: Optional[str] = None

    @property
    def first_arg(self) -> str:
        """Get the first argument or empty string."""
        return self.args[0] if self.args else ""

    @property
    def rest_args(self) -> str:
        """Get all arguments as a single string."""
        return " ".join(self.args)


def tokenize(text: str) -> Optional[Tuple[str, ...]]:
    """Split a command line into tokens.

    Returns None when the text is not command-shaped, otherwise the
    whitespace-separated tokens after the slash (possibly empty).
    """
    stripped = text.strip()
    if not stripped.startswith(COMMAND_PREFIX):
        return None
    # str.strip() and str.split() use str.isspace(): \x1c-\x1f count as
    # whitespace, U+FEFF does not
    return tuple(stripped[len(COMMAND_PREFIX):].split())


def parse(text: str) -> CommandResult:
    """Parse a line such as "/roll 1d20 +5" into a CommandResult.

    Only syntax is checked; whether the command exists is up to the
    caller.

    Args:
        text: Raw input line

    Returns:
        CommandResult instance
    """
    tokens = tokenize(text)
    if tokens is None:
        return CommandResult(error=NOT_A_COMMAND)
    if not tokens:
        return CommandResult(error=NO_COMMAND)

    return CommandResult(
        command=tokens[0].lower(),
        args=tokens[1:],
        is_valid=True,
    )


def is_command(text: str) -> bool:
    """Whether the text looks like a command attempt."""
    return tokenize(text) is not None


def get_command_name(text: str) -> str:
    """Lowercase command name, or empty string."""
    return parse(text).command


def get_command_args(text: str) -> Tuple[str, ...]:
    """Command arguments with their case preserved."""
    return parse(text).args
