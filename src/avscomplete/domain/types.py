"""Value types returned to host editors.

``RenderedCompletion`` is the single shape every query produces, whichever
index served it. ``to_suggestion`` mirrors the dictionary layout editor
autocomplete providers expect (``text`` or ``snippet``, ``type``,
``descriptionMoreURL`` ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CompletionKind(str, Enum):
    """Category label of a vocabulary item."""

    FUNCTION = "function"
    VARIABLE = "variable"
    TYPE = "type"


class RenderContext(str, Enum):
    """Selects the placeholder template used when rendering a signature."""

    ROOT = "root"
    RECEIVER = "receiver"


@dataclass(frozen=True, slots=True)
class RenderedCompletion:
    """
    One suggestion, ready to hand to the host editor.

    Attributes
    ----------
    kind : CompletionKind
        Category label (function, variable or type).
    description : str
        Human readable description.
    text : str | None
        Plain insertion text. Set for entries without a signature.
    snippet : str | None
        Templated snippet (``Name(${1:a}, ${2:b})``). Set for entries with a
        signature; exactly one of ``text``/``snippet`` is present.
    more_info_url : str | None
        Documentation link.
    left_label : str | None
        What the function returns.
    replacement_prefix : str | None
        Span the editor should replace, only stamped on unfiltered
        enumerations.
    """

    kind: CompletionKind
    description: str
    text: str | None = None
    snippet: str | None = None
    more_info_url: str | None = None
    left_label: str | None = None
    replacement_prefix: str | None = None

    @property
    def insertion(self) -> str:
        """Text used for display ordering: the plain text, else the snippet."""
        return self.text if self.text is not None else (self.snippet or "")

    def to_suggestion(self) -> dict[str, Any]:
        """Convert to the editor suggestion dictionary, omitting absent fields."""
        suggestion: dict[str, Any] = {
            "type": self.kind.value,
            "description": self.description,
        }
        if self.snippet is not None:
            suggestion["snippet"] = self.snippet
        else:
            suggestion["text"] = self.text
        if self.more_info_url is not None:
            suggestion["descriptionMoreURL"] = self.more_info_url
        if self.left_label is not None:
            suggestion["leftLabel"] = self.left_label
        if self.replacement_prefix is not None:
            suggestion["replacementPrefix"] = self.replacement_prefix
        return suggestion
