"""Chat input with slash-command autocomplete and history."""

import logging
from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from slashline.commands.parser import CommandResult, is_command, parse
from slashline.commands.registry import CommandRegistry, default_registry
from slashline.widgets.command_autocomplete import CommandAutocomplete

logger = logging.getLogger(__name__)


class CommandInput(Widget):
    """Chat line that understands slash commands.

    Keys reach the autocomplete panel first while it is showing; anything
    it doesn't use falls through to history navigation and Tab completion.
    """

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: auto;
        layout: vertical;
        background: $surface;
    }

    CommandInput > .command-line {
        height: 1;
    }

    CommandInput .command-prefix {
        width: 2;
        height: 1;
        color: $text;
    }

    CommandInput .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput .command-text:focus {
        border: none;
    }
    """

    class LineSubmitted(Message):
        """Message sent when a line is submitted.

        result is None for plain chat text.
        """

        def __init__(self, text: str, result: Optional[CommandResult]) -> None:
            self.text = text
            self.result = result
            super().__init__()

    class Cancelled(Message):
        """Message sent when Escape is pressed with no panel open."""

        pass

    def __init__(
        self,
        registry: Optional[CommandRegistry] = None,
        match_mode: str = "prefix",
        max_suggestions: Optional[int] = None,
        history_size: int = 100,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._registry = registry if registry is not None else default_registry()
        self._match_mode = match_mode
        self._max_suggestions = max_suggestions
        self._history_size = history_size
        self._history: List[str] = []
        self._history_index = -1
        self._saved_input = ""

    def compose(self) -> ComposeResult:
        yield CommandAutocomplete(id="cmd-autocomplete")
        with Horizontal(classes="command-line"):
            yield Static("> ", classes="command-prefix", id="cmd-prefix")
            yield Input(placeholder="Say something, or / for commands", classes="command-text", id="cmd-input")

    @property
    def autocomplete(self) -> CommandAutocomplete:
        """Get the autocomplete panel."""
        return self.query_one("#cmd-autocomplete", CommandAutocomplete)

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def set_value(self, value: str) -> None:
        """Set the input value and move the cursor to the end.

        Args:
            value: Text to set
        """
        self.input_widget.value = value
        self.input_widget.cursor_position = len(value)

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh suggestions as the user types."""
        self._refresh_suggestions(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        text = self.input_widget.value.strip()
        if not text:
            return

        self._add_to_history(text)
        self._history_index = -1
        self._saved_input = ""

        result = parse(text) if is_command(text) else None
        if result is not None and not result.is_valid:
            logger.debug("Rejected command %r: %s", text, result.error)

        self.set_value("")
        self.post_message(self.LineSubmitted(text, result))

    def on_key(self, event) -> None:
        """Handle special keys."""
        key = event.key

        if self.autocomplete.handle_key(key):
            event.prevent_default()
            event.stop()
        elif key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.Cancelled())
        elif key == "up":
            event.prevent_default()
            event.stop()
            self._history_previous()
        elif key == "down":
            event.prevent_default()
            event.stop()
            self._history_next()
        elif key == "tab":
            event.prevent_default()
            event.stop()
            self._complete()

    def on_command_autocomplete_suggestion_chosen(
        self, event: CommandAutocomplete.SuggestionChosen
    ) -> None:
        """Replace the typed command with the chosen one."""
        event.stop()
        self.autocomplete.dismiss()
        self.set_value(f"/{event.suggestion} ")

    def on_command_autocomplete_dismissed(
        self, event: CommandAutocomplete.Dismissed
    ) -> None:
        event.stop()
        self.autocomplete.dismiss()

    def _refresh_suggestions(self, value: str) -> None:
        if self._history_index != -1 and value == self._history[self._history_index]:
            # Recalled from history, keep up/down for history browsing
            self.autocomplete.show_suggestions(value, [])
            return
        suggestions = self._registry.suggestions(
            value,
            mode=self._match_mode,
            limit=self._max_suggestions,
        )
        self.autocomplete.show_suggestions(value, suggestions)

    def _add_to_history(self, line: str) -> None:
        """Add a line to history.

        Args:
            line: Line to add
        """
        # Don't add duplicates of the last line
        if self._history and self._history[-1] == line:
            return
        self._history.append(line)
        if len(self._history) > self._history_size:
            self._history = self._history[-self._history_size:]

    def _history_previous(self) -> None:
        """Navigate to previous history entry."""
        if not self._history:
            return

        if self._history_index == -1:
            # Save current input before navigating
            self._saved_input = self.input_widget.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1

        self.set_value(self._history[self._history_index])

    def _history_next(self) -> None:
        """Navigate to next history entry."""
        if self._history_index == -1:
            return

        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.set_value(self._history[self._history_index])
        else:
            # Return to saved input
            self._history_index = -1
            self.set_value(self._saved_input)

    def _complete(self) -> None:
        """Tab completion for the command word."""
        current = self.input_widget.value.lstrip()
        if not current.startswith("/") or any(ch.isspace() for ch in current):
            return

        partial = current[1:]
        common = self._registry.common_prefix(partial)
        matches = self._registry.suggestions(current)

        if len(matches) == 1:
            # Unique match - complete with space
            self.set_value(f"/{matches[0]} ")
        elif len(common) > len(partial):
            self.set_value(f"/{common}")
