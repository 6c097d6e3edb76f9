"""Main Textual application for slashline."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header, Input

from slashline.commands import CommandRegistry, CommandResult, default_registry, is_command
from slashline.config import Config, get_config
from slashline.widgets import CommandInput, StatusBar, Transcript

logger = logging.getLogger(__name__)


class SlashlineApp(App):
    """Chat composer with slash-command autocomplete."""

    TITLE = "slashline"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False),
        Binding("ctrl+l", "clear", "Clear", show=False),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        registry: Optional[CommandRegistry] = None,
    ) -> None:
        super().__init__()
        self._config = config if config is not None else get_config()
        self._command_registry = registry if registry is not None else default_registry()

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        yield Transcript(id="transcript")
        yield CommandInput(
            registry=self._command_registry,
            match_mode=self._config.match_mode,
            max_suggestions=self._config.max_suggestions,
            history_size=self._config.history_size,
            id="command-input",
        )
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self.query_one("#status-bar", StatusBar).set_match_mode(self._config.match_mode)
        self.query_one("#command-input", CommandInput).focus()

    def action_clear(self) -> None:
        self.query_one("#transcript", Transcript).clear()

    # ==================== Event Handlers ====================

    def on_input_changed(self, event: Input.Changed) -> None:
        """Track whether a command is being composed."""
        mode = "command" if is_command(event.value) else "chat"
        self.query_one("#status-bar", StatusBar).set_mode(mode)

    def on_command_input_line_submitted(self, event: CommandInput.LineSubmitted) -> None:
        """Handle a submitted line."""
        transcript = self.query_one("#transcript", Transcript)
        status = self.query_one("#status-bar", StatusBar)

        if event.result is None:
            transcript.add_chat(event.text)
            status.clear_message()
            return

        result = event.result
        known = result.is_valid and self._command_registry.has_command(result.command)
        transcript.add_command(event.text, result, known)

        if not result.is_valid:
            status.show_message(result.error or "")
        elif not known:
            logger.info("Unknown command /%s", result.command)
            status.show_message(f"Unknown command: {result.command}")
        else:
            status.clear_message()
            self._show_registry_info(result)

    def on_command_input_cancelled(self, event: CommandInput.Cancelled) -> None:
        self.query_one("#command-input", CommandInput).set_value("")

    def _show_registry_info(self, result: CommandResult) -> None:
        """Answer the commands that describe the catalogue itself."""
        transcript = self.query_one("#transcript", Transcript)
        spec = self._command_registry.get(result.command)
        name = spec.name if spec else result.command

        if name == "help":
            if result.first_arg:
                info = self._command_registry.command_help(result.first_arg)
                if info is None:
                    transcript.add_info(f"No help for: {result.first_arg}")
                    return
                transcript.add_info(f"{info['usage']}  {info['description']}")
                for example in info["examples"]:
                    transcript.add_info(f"  e.g. {example}")
            else:
                for info in self._command_registry.help():
                    transcript.add_info(f"{info['usage']}  {info['description']}")
        elif name == "commands":
            category = result.first_arg.lower()
            if category and category not in self._command_registry.categories():
                available = ", ".join(self._command_registry.categories())
                transcript.add_info(f"Unknown category: {category}. Available categories: {available}")
                return
            categories = [category] if category else self._command_registry.categories()
            for cat in categories:
                names = ", ".join(f"/{spec.name}" for spec in self._command_registry.by_category(cat))
                transcript.add_info(f"{cat}: {names}")
        elif name == "clear":
            self.action_clear()
