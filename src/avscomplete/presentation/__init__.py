"""Textual host for trying the completion service interactively."""

from .autocomplete import ScriptAutoComplete, apply_completion_text, split_cursor_context, to_dropdown_item
from .app import PlaygroundApp

__all__ = [
    "ScriptAutoComplete",
    "apply_completion_text",
    "split_cursor_context",
    "to_dropdown_item",
    "PlaygroundApp",
]
