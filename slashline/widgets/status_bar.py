"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the input mode and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._mode = "chat"
        self._match_mode = ""
        self._message: Optional[str] = None

    def on_mount(self) -> None:
        self._update()

    def set_mode(self, mode: str) -> None:
        """Set the current mode: chat, command."""
        if mode == self._mode:
            return
        self._mode = mode
        self._message = None
        self._update()

    def set_match_mode(self, match_mode: str) -> None:
        self._match_mode = match_mode
        self._update()

    def show_message(self, message: str) -> None:
        """Show a temporary message."""
        self._message = message
        self._update()

    def clear_message(self) -> None:
        """Clear the temporary message."""
        self._message = None
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()

        # Mode indicator
        if self._mode == "command":
            text.append("COMMAND", style="bold black on yellow")
        else:
            text.append("CHAT", style="bold black on cyan")

        if self._match_mode:
            text.append(" | ")
            text.append(f"[{self._match_mode}]", style="cyan")

        # Message or hints
        if self._message:
            text.append("  ")
            text.append(self._message, style="yellow")
        else:
            hints = self._get_hints()
            if hints:
                text.append("  ")
                for i, (key, desc) in enumerate(hints):
                    if i > 0:
                        text.append(" ", style="dim")
                    text.append(key, style="bold yellow")
                    text.append(f" {desc}", style="dim")

        self.update(text)

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the current mode."""
        if self._mode == "command":
            return [
                ("↑/↓", "choose"),
                ("Tab", "complete"),
                ("Enter", "run"),
                ("Esc", "close"),
            ]
        return [
            ("/", "commands"),
            ("↑/↓", "history"),
            ("Enter", "send"),
            ("^Q", "quit"),
        ]
