"""Tests for CompletionService."""

from avscomplete.completion.classifier import ContextClassifier
from avscomplete.completion.service import CompletionService
from avscomplete.completion.strategy import LookupRoot
from avscomplete.core.loader import build_indices
from avscomplete.domain.types import CompletionKind
from avscomplete.domain.vocabulary import VocabularyDocument


def insertions(completions):
    return [completion.insertion for completion in completions]


def test_root_lookup(service):
    completions = service.get_completions("x = ", "Bl")

    assert insertions(completions) == [
        "BlankClip(${1:clip}, ${2:length})",
        "Blur(${1:clip}, ${2:amount})",
    ]
    assert all(completion.kind is CompletionKind.FUNCTION for completion in completions)


def test_root_lookup_includes_variables(service):
    (completion,) = service.get_completions("x = ", "la")
    assert completion.text == "last"
    assert completion.kind is CompletionKind.VARIABLE


def test_receiver_lookup_strips_receiver(service):
    completions = service.get_completions("x = clip.", "Tr")
    assert insertions(completions) == ["Trim(${1:first_frame}, ${2:last_frame})"]


def test_receiver_lookup_excludes_non_receiver_functions(service):
    assert service.get_completions("x = clip.", "Avi") is None


def test_receiver_dot_without_prefix_is_no_result(service):
    assert service.get_completions("x = clip.", "") is None


def test_bare_dot_is_no_result(service):
    assert service.get_completions("", ".") is None


def test_enumerate_types_in_parameter_list(service):
    completions = service.get_completions("Subtitle(", "")

    assert [c.text for c in completions] == ["clip", "int", "bool"]
    assert all(c.kind is CompletionKind.TYPE for c in completions)
    assert all(c.replacement_prefix is None for c in completions)


def test_enumerate_types_stamps_typed_trigger(service):
    completions = service.get_completions("function Foo", "(")
    assert {c.replacement_prefix for c in completions} == {"("}


def test_lookup_types(service):
    completions = service.get_completions("function Foo(clip c, ", "i")
    assert [c.text for c in completions] == ["int"]


def test_parameter_name_is_no_result(service):
    assert service.get_completions("function Foo(clip ", "c") is None


def test_nothing_matching_is_no_result(service):
    assert service.get_completions("x = ", "Zz") is None


def test_repeated_queries_are_identical(service):
    assert service.get_completions("x = ", "b") == service.get_completions("x = ", "b")


def test_reload_swaps_indices(service):
    fresh = build_indices(VocabularyDocument(functions=[{"text": "Zoom", "description": "d"}]))
    old = service.indices

    service.reload(fresh)

    assert service.indices is fresh
    assert [c.text for c in service.get_completions("x = ", "zo")] == ["Zoom"]
    assert "Trim" in old.root


def test_custom_classifier(indices):
    class AlwaysRoot:
        def can_handle(self, request):
            return True

        def classify(self, request):
            return LookupRoot("Tr")

    service = CompletionService(indices, ContextClassifier([AlwaysRoot()]))
    assert insertions(service.get_completions("x = clip.", "")) == [
        "Trim(${1:clip}, ${2:first_frame}, ${3:last_frame})"
    ]


def test_from_vocabulary(document):
    service = CompletionService.from_vocabulary(document, wiki_base_url="https://docs/")
    (completion,) = service.get_completions("", "Avi")
    assert completion.more_info_url == "https://docs/AviSource"
    assert completion.to_suggestion() == {
        "type": "function",
        "description": "Opens an AVI file.",
        "snippet": "AviSource(${1:filename}, ${2:audio})",
        "descriptionMoreURL": "https://docs/AviSource",
        "leftLabel": "clip",
    }


def test_from_path_uses_bundled_vocabulary():
    service = CompletionService.from_path()
    completions = service.get_completions("c = last.", "Tri")
    assert insertions(completions) == ["Trim(${1:first_frame}, ${2:last_frame}, ${3:pad})"]
