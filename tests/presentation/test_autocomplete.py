from avscomplete.domain.types import CompletionKind, RenderedCompletion
from avscomplete.presentation.autocomplete import (
    apply_completion_text,
    expand_placeholders,
    split_cursor_context,
    to_dropdown_item,
)


def test_split_cursor_context_separates_typed_fragment() -> None:
    assert split_cursor_context("x = clip.Tr", 11) == ("x = clip.", "Tr")


def test_split_cursor_context_uses_current_line_only() -> None:
    text = "a = AviSource(f)\nb = a.Bl"
    assert split_cursor_context(text, len(text)) == ("b = a.", "Bl")


def test_split_cursor_context_ignores_text_after_cursor() -> None:
    assert split_cursor_context("Subtitle(clip)", 9) == ("Subtitle(", "")


def test_expand_placeholders() -> None:
    assert expand_placeholders("Trim(${1:first_frame}, ${2:last_frame})") == "Trim(first_frame, last_frame)"


def test_to_dropdown_item_shows_expanded_snippet() -> None:
    completion = RenderedCompletion(
        kind=CompletionKind.FUNCTION,
        description="Trims a clip.",
        snippet="Trim(${1:first_frame})",
    )

    item = to_dropdown_item(completion)

    assert item.value == "Trim(first_frame)"


def test_apply_completion_replaces_typed_fragment() -> None:
    result = apply_completion_text("Trim(first_frame)", "x = clip.Tr", 11)

    assert result.text == "x = clip.Trim(first_frame)"
    assert result.cursor == len("x = clip.Trim(first_frame)")


def test_apply_completion_keeps_text_after_cursor() -> None:
    result = apply_completion_text("int", "function Foo(in)", 15)

    assert result.text == "function Foo(int)"
    assert result.cursor == 16
