"""
ScriptAutoComplete - textual-autocomplete overlay backed by the completion service.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from textual.widgets import Input
from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from avscomplete.completion.service import CompletionService
from avscomplete.domain.types import CompletionKind, RenderedCompletion
from avscomplete.logger import get_logger

logger = get_logger("autocomplete")

_KIND_ICONS = {
    CompletionKind.FUNCTION: "ƒ ",
    CompletionKind.VARIABLE: "v ",
    CompletionKind.TYPE: "τ ",
}
_TYPED_FRAGMENT = re.compile(r"\w*$")
_PLACEHOLDER = re.compile(r"\$\{\d+:([^}]*)\}")


@dataclass(slots=True)
class ApplyResult:
    """Result of applying a completion value."""

    text: str
    cursor: int


def split_cursor_context(text: str, cursor: int) -> tuple[str, str]:
    """Split the current line before the cursor into (line prefix, typed fragment)."""
    line = text[:cursor].rsplit("\n", 1)[-1]
    typed = _TYPED_FRAGMENT.search(line).group(0)
    return line[: len(line) - len(typed)], typed


def expand_placeholders(snippet: str) -> str:
    """Replace ``${1:name}`` placeholders with their default names."""
    return _PLACEHOLDER.sub(r"\1", snippet)


def to_dropdown_item(completion: RenderedCompletion) -> DropdownItem:
    return DropdownItem(
        main=expand_placeholders(completion.insertion),
        prefix=_KIND_ICONS.get(completion.kind, ""),
    )


def apply_completion_text(value: str, text: str, cursor: int) -> ApplyResult:
    """Replace the typed fragment before the cursor with ``value``."""
    _, typed = split_cursor_context(text, cursor)
    start = cursor - len(typed)
    new_text = text[:start] + value + text[cursor:]
    return ApplyResult(text=new_text, cursor=start + len(value))


class ScriptAutoComplete(AutoComplete):
    """
    AutoComplete overlay for a script input line.

    Candidates come pre-filtered and pre-sorted from the service, so the
    fuzzy matching of the base class is bypassed.
    """

    def __init__(self, target: Input, service: CompletionService, **kwargs) -> None:
        self._service = service
        super().__init__(
            target=target,
            candidates=self._collect_candidates,
            prevent_default_enter=True,
            **kwargs,
        )

    def _collect_candidates(self, state: TargetState) -> list[DropdownItem]:
        line_prefix, typed = split_cursor_context(state.text, state.cursor_position)
        completions = self._service.get_completions(line_prefix, typed) or []
        logger.debug("Collected {} completion candidates", len(completions))
        return [to_dropdown_item(completion) for completion in completions]

    def get_search_string(self, target_state: TargetState) -> str:
        return split_cursor_context(target_state.text, target_state.cursor_position)[1]

    def get_matches(
        self,
        target_state: TargetState,
        candidates: list[DropdownItem],
        search_string: str,
    ) -> list[DropdownItem]:
        return candidates

    def should_show_dropdown(self, _search_string: str) -> bool:
        return self.option_list.option_count > 0

    def apply_completion(self, value: str, state: TargetState) -> None:
        result = apply_completion_text(value, state.text, state.cursor_position)
        self.target.value = result.text
        self.target.cursor_position = result.cursor
        logger.info("Applied completion {!r}; new cursor={}", value, result.cursor)
