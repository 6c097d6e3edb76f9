"""Tests for the command catalogue."""

import pytest

from slashline.commands.registry import (
    BUILTIN_COMMANDS,
    CommandRegistry,
    CommandSpec,
    default_registry,
)


@pytest.fixture
def registry():
    reg = CommandRegistry()
    reg.register_many([
        CommandSpec("attack", "Attack", "/attack [weapon]", ["/attack sword"], "dice"),
        CommandSpec("cast", "Cast a spell", category="combat", aliases=["c"]),
        CommandSpec("move", "Move", category="utility"),
        CommandSpec("map", "Show map", category="utility"),
    ])
    return reg


class TestRegister:
    """Test registering commands."""

    def test_lookup_case_insensitive(self, registry):
        """Lookups ignore case."""
        assert registry.get("ATTACK").name == "attack"
        assert registry.has_command("Cast")

    def test_alias_lookup(self, registry):
        """Aliases resolve to their command."""
        assert registry.get("c").name == "cast"

    def test_unknown(self, registry):
        """Unknown commands are not found."""
        assert registry.get("fly") is None
        assert not registry.has_command("fly")

    def test_duplicate_name_rejected(self, registry):
        """An alias can't steal another command's name."""
        with pytest.raises(ValueError):
            registry.register(CommandSpec("charge", aliases=["move"]))

    def test_name_taken_by_alias(self, registry):
        """A name can't shadow an existing alias."""
        with pytest.raises(ValueError):
            registry.register(CommandSpec("c"))

    @pytest.mark.parametrize("name", ["", "two words", "/slash"])
    def test_invalid_name(self, registry, name):
        """Empty, spaced or slashed names are rejected."""
        with pytest.raises(ValueError):
            registry.register(CommandSpec(name))

    def test_reregister_replaces(self, registry):
        """Registering the same name again replaces the spec."""
        registry.register(CommandSpec("move", "Move faster"))
        assert registry.get("move").description == "Move faster"

    def test_reregister_drops_old_aliases(self, registry):
        """Re-registering without aliases frees the old ones."""
        registry.register(CommandSpec("cast", "Cast again"))
        assert registry.get("c") is None
        registry.register(CommandSpec("charge", aliases=["c"]))
        assert registry.get("c").name == "charge"
        assert registry.get("cast").description == "Cast again"

    def test_clear(self, registry):
        """clear() empties the registry."""
        registry.clear()
        assert registry.all_commands() == []
        assert registry.get("c") is None


class TestHelp:
    """Test help and category views."""

    def test_categories(self, registry):
        """Categories are sorted and unique."""
        assert registry.categories() == ["combat", "dice", "utility"]

    def test_by_category(self, registry):
        """Commands filter by category."""
        names = [spec.name for spec in registry.by_category("utility")]
        assert names == ["move", "map"]

    def test_command_help(self, registry):
        """Help for one command."""
        info = registry.command_help("attack")
        assert info["usage"] == "/attack [weapon]"
        assert info["examples"] == ["/attack sword"]

    def test_default_usage(self, registry):
        """Usage defaults to the bare command."""
        assert registry.command_help("move")["usage"] == "/move"

    def test_missing_help(self, registry):
        """Unknown commands have no help."""
        assert registry.command_help("fly") is None

    def test_help_lists_all(self, registry):
        """help() covers every command."""
        assert len(registry.help()) == 4


class TestSuggestions:
    """Test autocomplete suggestions."""

    def test_prefix(self, registry):
        """Prefix matches are sorted."""
        assert registry.suggestions("/m") == ["map", "move"]

    def test_bare_slash_lists_all(self, registry):
        """A bare slash offers every command."""
        assert registry.suggestions("/") == ["attack", "cast", "map", "move"]

    def test_case_insensitive(self, registry):
        """Typed case doesn't matter."""
        assert registry.suggestions("/AT") == ["attack"]

    def test_not_a_command(self, registry):
        """Plain text gets no suggestions."""
        assert registry.suggestions("m") == []
        assert registry.suggestions("") == []

    def test_stops_after_command_word(self, registry):
        """No suggestions once arguments are being typed."""
        assert registry.suggestions("/attack ") == []
        assert registry.suggestions("/attack sw") == []

    def test_no_match(self, registry):
        """Unmatched input gets nothing."""
        assert registry.suggestions("/zzz") == []

    def test_limit(self, registry):
        """Limit truncates the list."""
        assert registry.suggestions("/", limit=2) == ["attack", "cast"]

    def test_fuzzy(self, registry):
        """Fuzzy mode matches subsequences, tightest first."""
        assert registry.suggestions("/mp", mode="fuzzy") == ["map"]
        assert registry.suggestions("/ma", mode="fuzzy") == ["map"]
        assert registry.suggestions("/ak", mode="fuzzy") == ["attack"]

    def test_fuzzy_prefers_tight_matches(self, registry):
        """Contiguous matches rank ahead of scattered ones."""
        assert registry.suggestions("/at", mode="fuzzy")[0] == "attack"

    def test_unknown_mode(self, registry):
        """Unknown match modes are rejected."""
        with pytest.raises(ValueError):
            registry.suggestions("/a", mode="regex")

    def test_no_empty_suggestions(self, registry):
        """Suggestions are never empty strings."""
        assert "" not in registry.suggestions("/", mode="fuzzy")

    def test_common_prefix(self, registry):
        """Common prefix of matching names."""
        assert registry.common_prefix("m") == "m"
        assert registry.common_prefix("at") == "attack"
        assert registry.common_prefix("zz") == "zz"


class TestDefaultRegistry:
    """Test the built-in catalogue."""

    def test_all_builtins_registered(self):
        """Every built-in command is present."""
        registry = default_registry()
        assert len(registry.all_commands()) == len(BUILTIN_COMMANDS)

    def test_dice_commands(self):
        """Dice commands complete from a prefix."""
        registry = default_registry()
        assert registry.suggestions("/d") == ["d20", "damage", "defend", "dice"]
        assert registry.get("r").name == "roll"

    def test_categories(self):
        """Built-in categories."""
        assert default_registry().categories() == ["character", "combat", "dice", "utility"]
