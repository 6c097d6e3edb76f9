"""Autocomplete panel listing commands that match the input."""

import logging
from typing import List

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from slashline.selector import SuggestionSelector

logger = logging.getLogger(__name__)


class SuggestionItem(Static):
    """One suggestion row."""

    DEFAULT_CSS = """
    SuggestionItem {
        height: 1;
        padding: 0 1;
    }

    SuggestionItem.-selected {
        background: $accent;
        color: $text;
        text-style: bold;
    }
    """

    class Clicked(Message):
        """Message sent when a row is clicked."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, suggestion: str, index: int, **kwargs) -> None:
        text = Text()
        text.append("/", style="dim")
        text.append(suggestion, style="bold cyan")
        super().__init__(text, **kwargs)
        self.suggestion = suggestion
        self.index = index

    def on_click(self) -> None:
        self.post_message(self.Clicked(self.index))


class CommandAutocomplete(Widget):
    """Panel of command suggestions driven by the keyboard.

    The owning input forwards key names to handle_key() and feeds fresh
    suggestions through show_suggestions() on every change. The panel
    posts SuggestionChosen or Dismissed; closing it is left to the owner.
    """

    DEFAULT_CSS = """
    CommandAutocomplete {
        height: auto;
        max-height: 14;
        background: $surface;
        border: round $primary;
    }

    CommandAutocomplete > .autocomplete-title {
        height: 1;
        color: $text-muted;
    }

    CommandAutocomplete > .autocomplete-list {
        height: auto;
        max-height: 8;
    }

    CommandAutocomplete > .autocomplete-hint {
        height: 1;
        color: $text-muted;
    }
    """

    class SuggestionChosen(Message):
        """Message sent when a suggestion is confirmed."""

        def __init__(self, suggestion: str) -> None:
            self.suggestion = suggestion
            super().__init__()

    class Dismissed(Message):
        """Message sent when the panel is dismissed without a choice."""

        pass

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.selector = SuggestionSelector(
            on_select=self._on_select,
            on_scroll=self._scroll_to_item,
        )
        self._input_value = ""
        self._rows: List[SuggestionItem] = []

    def compose(self) -> ComposeResult:
        yield Static("", classes="autocomplete-title", id="autocomplete-title")
        yield VerticalScroll(classes="autocomplete-list", id="autocomplete-list")
        yield Static("", classes="autocomplete-hint", id="autocomplete-hint")

    def on_mount(self) -> None:
        self.display = False

    def on_unmount(self) -> None:
        self.selector.detach()

    def show_suggestions(self, input_value: str, suggestions: List[str]) -> None:
        """Replace the suggestions for the current input.

        Args:
            input_value: Text currently in the input box
            suggestions: Ordered candidates, may be empty
        """
        self._input_value = input_value
        self.selector.update(suggestions, visible=bool(suggestions))
        self._rebuild_list()
        self.display = self.selector.active
        self._update_labels()

    def dismiss(self) -> None:
        """Hide the panel and forget the current suggestions."""
        self.selector.update([], visible=False)
        self._rebuild_list()
        self.display = False

    def handle_key(self, key: str) -> bool:
        """Offer a key to the panel.

        Returns:
            True if the key was used and should not reach the input
        """
        if not self.selector.handle_key(key):
            return False
        self._update_selection()
        return True

    def on_suggestion_item_clicked(self, event: SuggestionItem.Clicked) -> None:
        event.stop()
        if self.selector.select(event.index):
            self._update_selection()
            self.selector.confirm()

    def _rebuild_list(self) -> None:
        lst = self.query_one("#autocomplete-list", VerticalScroll)
        lst.remove_children()
        # A new list always starts at row 0
        lst.scroll_home(animate=False)

        self._rows = [
            SuggestionItem(suggestion, index)
            for index, suggestion in enumerate(self.selector.suggestions)
        ]
        if self._rows:
            lst.mount(*self._rows)
        for index, item in enumerate(self._rows):
            self.selector.register_item(index, item)
        self._update_selection()

    def _update_selection(self) -> None:
        selected = self.selector.selected_index
        for index, item in enumerate(self._rows):
            item.set_class(index == selected, "-selected")
        self._update_labels()

    def _update_labels(self) -> None:
        count = len(self.selector.suggestions)
        name = self._input_value.strip()[1:]

        title = Text()
        title.append(f'Commands matching "{name}"')
        title.append(f"  {count} found", style="bold")
        self.query_one("#autocomplete-title", Static).update(title)

        hint = Text()
        hint.append("↑↓ navigate, Enter select, Esc cancel", style="dim")
        if count:
            hint.append(f"  {self.selector.selected_index + 1} of {count}")
        self.query_one("#autocomplete-hint", Static).update(hint)

    def _scroll_to_item(self, item: SuggestionItem) -> None:
        if item.is_mounted:
            self._reveal(item)
        else:
            # Freshly built rows are mounted by the next refresh
            self.call_after_refresh(self._reveal, item)

    def _reveal(self, item: SuggestionItem) -> None:
        # scroll_visible moves the minimum distance to reveal the item
        if item.is_mounted and item in self._rows:
            item.scroll_visible(animate=False)

    def _on_select(self, suggestion) -> None:
        if suggestion is None:
            logger.debug("Autocomplete dismissed")
            self.post_message(self.Dismissed())
        else:
            logger.debug("Autocomplete chose %r", suggestion)
            self.post_message(self.SuggestionChosen(suggestion))
