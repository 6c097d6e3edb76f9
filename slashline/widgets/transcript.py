"""Scrolling transcript of chat lines and parsed commands."""

from typing import List

from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from slashline.commands.parser import CommandResult


def format_result(text: str, result: CommandResult, known: bool = True) -> Text:
    """Render a parsed command line."""
    line = Text()
    if not result.is_valid:
        line.append("! ", style="bold red")
        line.append(text, style="dim")
        line.append(f"  {result.error}", style="red")
        return line

    line.append(f"/{result.command}", style="bold cyan" if known else "bold red")
    for arg in result.args:
        line.append(" ")
        line.append(arg, style="green")
    if not known:
        line.append(
            f"  Unknown command: {result.command}. Use /help to see available commands.",
            style="red",
        )
    return line


class Transcript(VerticalScroll):
    """Chat history pane."""

    DEFAULT_CSS = """
    Transcript {
        height: 1fr;
        padding: 0 1;
    }

    Transcript > Static {
        height: auto;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries: List[Text] = []

    @property
    def entries(self) -> List[Text]:
        return list(self._entries)

    def add_line(self, line: Text) -> None:
        """Append a line and keep the newest one in view."""
        self._entries.append(line)
        self.mount(Static(line))
        self.scroll_end(animate=False)

    def add_chat(self, text: str, speaker: str = "You") -> None:
        line = Text()
        line.append(f"{speaker}: ", style="bold")
        line.append(text)
        self.add_line(line)

    def add_command(self, text: str, result: CommandResult, known: bool = True) -> None:
        self.add_line(format_result(text, result, known))

    def add_info(self, message: str) -> None:
        self.add_line(Text(message, style="dim"))

    def clear(self) -> None:
        self._entries.clear()
        self.remove_children()
