"""Catalogue of known slash commands, used for help and autocomplete."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from slashline.commands.parser import COMMAND_PREFIX

logger = logging.getLogger(__name__)

MATCH_MODES = ("prefix", "fuzzy")


@dataclass(frozen=True)
class CommandSpec:
    """Description of a command the chat understands."""

    name: str
    description: str = ""
    usage: str = ""
    examples: List[str] = field(default_factory=list)
    category: str = "utility"
    aliases: List[str] = field(default_factory=list)

    def to_help(self) -> dict:
        """Help entry for display."""
        return {
            "name": self.name,
            "description": self.description,
            "usage": self.usage or f"{COMMAND_PREFIX}{self.name}",
            "examples": list(self.examples),
            "category": self.category,
            "aliases": list(self.aliases),
        }


def _check_name(name: str) -> str:
    key = name.lower()
    if not key or any(ch.isspace() for ch in key) or key.startswith(COMMAND_PREFIX):
        raise ValueError(f"Invalid command name: {name!r}")
    return key


def _fuzzy_score(query: str, name: str) -> Optional[int]:
    """Score a subsequence match, lower is tighter. None if no match."""
    pos = -1
    first = -1
    for ch in query:
        pos = name.find(ch, pos + 1)
        if pos == -1:
            return None
        if first == -1:
            first = pos
    if first == -1:
        return 0
    # Span of the match plus how late it starts
    return (pos - first + 1 - len(query)) * 2 + first


class CommandRegistry:
    """Registry of command specs keyed by lowercase name."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandSpec] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, spec: CommandSpec) -> None:
        """Register a command.

        Raises:
            ValueError: If the name or an alias is invalid or already taken
        """
        name = _check_name(spec.name)
        aliases = [_check_name(alias) for alias in spec.aliases]

        for key in [name] + aliases:
            owner = self._commands.get(key) or self._commands.get(self._aliases.get(key, ""))
            if owner is not None and owner.name.lower() != name:
                raise ValueError(f"Command name already registered: {key}")

        self._commands[name] = spec
        self._aliases = {
            alias: target for alias, target in self._aliases.items() if target != name
        }
        for alias in aliases:
            self._aliases[alias] = name
        logger.debug("Registered command /%s (%d aliases)", name, len(aliases))

    def register_many(self, specs: List[CommandSpec]) -> None:
        """Register several commands at once."""
        for spec in specs:
            self.register(spec)

    def get(self, name: str) -> Optional[CommandSpec]:
        """Look up a command by name or alias, case-insensitively."""
        key = name.lower()
        key = self._aliases.get(key, key)
        return self._commands.get(key)

    def has_command(self, name: str) -> bool:
        return self.get(name) is not None

    def all_commands(self) -> List[CommandSpec]:
        return list(self._commands.values())

    def names(self) -> List[str]:
        """Sorted command names (aliases excluded)."""
        return sorted(self._commands)

    def categories(self) -> List[str]:
        return sorted({spec.category for spec in self._commands.values()})

    def by_category(self, category: str) -> List[CommandSpec]:
        return [spec for spec in self._commands.values() if spec.category == category]

    def help(self) -> List[dict]:
        return [spec.to_help() for spec in self._commands.values()]

    def command_help(self, name: str) -> Optional[dict]:
        spec = self.get(name)
        return spec.to_help() if spec else None

    def clear(self) -> None:
        self._commands.clear()
        self._aliases.clear()

    def suggestions(
        self,
        partial_input: str,
        mode: str = "prefix",
        limit: Optional[int] = None,
    ) -> List[str]:
        """Command names matching a partially typed command.

        Only offers suggestions while the user is still typing the command
        word itself, e.g. "/ro" but not "/roll 1d20".

        Args:
            partial_input: Current contents of the input box
            mode: "prefix" or "fuzzy"
            limit: Maximum number of suggestions

        Returns:
            Ordered list of command names
        """
        if mode not in MATCH_MODES:
            raise ValueError(f"Unknown match mode: {mode}")

        text = partial_input.lstrip()
        if not text.startswith(COMMAND_PREFIX):
            return []
        partial = text[len(COMMAND_PREFIX):]
        if any(ch.isspace() for ch in partial):
            return []
        partial = partial.lower()

        if mode == "prefix":
            matches = [name for name in self.names() if name.startswith(partial)]
        else:
            scored = []
            for name in self._commands:
                score = _fuzzy_score(partial, name)
                if score is not None:
                    scored.append((score, name))
            matches = [name for _, name in sorted(scored)]

        if limit is not None:
            matches = matches[:limit]
        return matches

    def common_prefix(self, partial: str) -> str:
        """Longest prefix shared by every command starting with partial."""
        partial = partial.lower()
        matches = [name for name in self.names() if name.startswith(partial)]
        if not matches:
            return partial

        common = matches[0]
        for match in matches[1:]:
            while not match.startswith(common):
                common = common[:-1]
        return common


BUILTIN_COMMANDS: List[CommandSpec] = [
    # Dice
    CommandSpec(
        "dice",
        "Roll dice with standard notation (e.g., 1d20, 3d6+2)",
        "/dice <notation>",
        ["/dice 1d20", "/dice 3d6+2", "/dice 1d100-5"],
        "dice",
    ),
    CommandSpec(
        "roll",
        "Alternative dice rolling command (same as /dice)",
        "/roll <notation>",
        ["/roll 1d20", "/roll 3d6+2"],
        "dice",
        ["r"],
    ),
    CommandSpec("d20", "Quick roll of a d20", "/d20 [modifier]", ["/d20", "/d20 +5"], "dice"),
    CommandSpec(
        "attack",
        "Roll attack with character's attack bonus",
        "/attack [weapon]",
        ["/attack", "/attack sword"],
        "dice",
    ),
    CommandSpec("initiative", "Roll initiative for combat", "/initiative", ["/initiative"], "dice", ["init"]),
    # Combat
    CommandSpec("defend", "Take defensive action in combat", "/defend", ["/defend"], "combat"),
    CommandSpec(
        "spell",
        "Cast a spell (rolls spell attack or saving throw)",
        "/spell <spell_name> [target]",
        ["/spell fireball", "/spell cure wounds self"],
        "combat",
        ["cast"],
    ),
    CommandSpec("item", "Use an item or consumable", "/item <item_name> [target]", ["/item potion self"], "combat"),
    CommandSpec(
        "damage",
        "Roll damage for a weapon or spell",
        "/damage <dice_notation> [weapon/spell]",
        ["/damage 1d8 sword", "/damage 8d6 fireball"],
        "combat",
    ),
    CommandSpec("save", "Roll a saving throw", "/save <ability> [dc]", ["/save dex 15"], "combat"),
    # Character
    CommandSpec("character", "Display character overview and basic information", "/character", category="character"),
    CommandSpec("stats", "Display character ability scores and modifiers", "/stats", category="character"),
    CommandSpec("inventory", "Display character equipment and items", "/inventory", category="character", aliases=["inv"]),
    CommandSpec("proficiency", "Display character skills and proficiencies", "/proficiency", category="character"),
    CommandSpec("status", "Display current character status and health", "/status", category="character"),
    # Utility
    CommandSpec("help", "Show help information for commands", "/help [command]", ["/help", "/help dice"], "utility", ["h"]),
    CommandSpec("location", "Show current location information", "/location", category="utility"),
    CommandSpec("clear", "Clear the chat", "/clear", category="utility"),
    CommandSpec("version", "Show application version information", "/version", category="utility"),
    CommandSpec("commands", "List all available commands", "/commands [category]", ["/commands dice"], "utility"),
]


def default_registry() -> CommandRegistry:
    """Registry holding the built-in command catalogue."""
    registry = CommandRegistry()
    registry.register_many(BUILTIN_COMMANDS)
    return registry
