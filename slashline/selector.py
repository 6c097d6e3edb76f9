"""Selection cursor and key protocol for the command autocomplete panel.

The selector knows nothing about how suggestions are computed or drawn.
The host feeds it candidate lists and key names and gets two things back:

- the selection callback, called with the chosen suggestion or with
  ``None`` when the user dismisses the panel;
- the scroll callback, called with the item handle the rendering layer
  registered for the newly selected index.

Every event is ignored while the panel is hidden or has nothing to show.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Tuple

NEXT = "next"
PREVIOUS = "previous"
CONFIRM = "confirm"
CANCEL = "cancel"

KEYMAP: Dict[str, str] = {
    "down": NEXT,
    "ctrl+n": NEXT,
    "up": PREVIOUS,
    "ctrl+p": PREVIOUS,
    "enter": CONFIRM,
    "escape": CANCEL,
}

SelectCallback = Callable[[Optional[str]], None]
ScrollCallback = Callable[[Any], None]


class SuggestionSelector:
    """Cursor over an externally ordered list of suggestions."""

    def __init__(
        self,
        on_select: Optional[SelectCallback] = None,
        on_scroll: Optional[ScrollCallback] = None,
    ) -> None:
        self._on_select = on_select
        self._on_scroll = on_scroll
        self._suggestions: Tuple[str, ...] = ()
        self._selected_index = 0
        self._visible = False
        self._items: Dict[int, Any] = {}
        self._attached = True

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return self._suggestions

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def active(self) -> bool:
        """Whether key events are currently captured."""
        return self._attached and self._visible and bool(self._suggestions)

    @property
    def selected(self) -> Optional[str]:
        """The suggestion under the cursor, if any."""
        if 0 <= self._selected_index < len(self._suggestions):
            return self._suggestions[self._selected_index]
        return None

    # Lifecycle events

    def update(self, suggestions: Iterable[str], visible: Optional[bool] = None) -> None:
        """Replace the candidate list and reset the cursor.

        Empty strings are dropped so they can't be confused with a cancel.
        """
        self._suggestions = tuple(s for s in suggestions if s)
        self._items.clear()
        if visible is not None:
            self._visible = visible
        self._move_to(0, force=True)

    def input_changed(self, text: str) -> None:
        """The composing text changed; the cursor goes back to the top."""
        self._move_to(0, force=True)

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def detach(self) -> None:
        """End the session. Later events are ignored."""
        self._attached = False
        self._visible = False
        self._on_select = None
        self._on_scroll = None
        self._items.clear()
        self._suggestions = ()
        self._selected_index = 0

    # Item registry

    def register_item(self, index: int, handle: Any) -> None:
        """Associate a rendered item with a suggestion index."""
        if 0 <= index < len(self._suggestions):
            self._items[index] = handle
            if index == self._selected_index and self._on_scroll is not None:
                self._on_scroll(handle)

    def clear_items(self) -> None:
        self._items.clear()

    def item(self, index: int) -> Any:
        return self._items.get(index)

    # Key protocol

    def handle_key(self, key: str) -> bool:
        """Dispatch a key name.

        Returns:
            True if the key was consumed and its default handling should be
            suppressed
        """
        action = KEYMAP.get(key)
        if action is None or not self.active:
            return False

        if action == NEXT:
            self.next()
        elif action == PREVIOUS:
            self.previous()
        elif action == CONFIRM:
            self.confirm()
        elif action == CANCEL:
            self.cancel()
        return True

    def next(self) -> bool:
        if not self.active:
            return False
        self._move_to((self._selected_index + 1) % len(self._suggestions))
        return True

    def previous(self) -> bool:
        if not self.active:
            return False
        count = len(self._suggestions)
        self._move_to((self._selected_index - 1 + count) % count)
        return True

    def select(self, index: int) -> bool:
        """Move the cursor to an index chosen by the host (e.g. a click)."""
        if not self.active or not 0 <= index < len(self._suggestions):
            return False
        self._move_to(index)
        return True

    def confirm(self) -> bool:
        """Emit the suggestion under the cursor."""
        if not self.active:
            return False
        suggestion = self.selected
        if suggestion is None:
            return False
        self._emit(suggestion)
        return True

    def cancel(self) -> bool:
        """Dismiss the panel without choosing anything."""
        if not self.active:
            return False
        self._emit(None)
        return True

    def _emit(self, value: Optional[str]) -> None:
        if self._on_select is not None:
            self._on_select(value)

    def _move_to(self, index: int, force: bool = False) -> None:
        changed = index != self._selected_index
        self._selected_index = index
        if (changed or force) and self._on_scroll is not None:
            handle = self._items.get(index)
            if handle is not None:
                self._on_scroll(handle)
