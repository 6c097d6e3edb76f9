"""Textual widgets for slashline."""

from slashline.widgets.command_autocomplete import CommandAutocomplete, SuggestionItem
from slashline.widgets.command_input import CommandInput
from slashline.widgets.status_bar import StatusBar
from slashline.widgets.transcript import Transcript

__all__ = [
    "CommandAutocomplete",
    "SuggestionItem",
    "CommandInput",
    "StatusBar",
    "Transcript",
]
