"""Tests for the context classifier and its rules."""

import pytest

from avscomplete.completion.classifier import ContextClassifier
from avscomplete.completion.rules import RootRule
from avscomplete.completion.strategy import (
    CompletionRequest,
    EnumerateTypes,
    LookupReceiverFunctions,
    LookupRoot,
    LookupTypes,
    NoCompletion,
)


@pytest.fixture
def classifier() -> ContextClassifier:
    return ContextClassifier()


@pytest.mark.parametrize(
    "line_prefix, typed_prefix, expected",
    [
        ("Subtitle(", "", EnumerateTypes()),
        ("Subtitle(c, ", "", EnumerateTypes()),
        ("x = clip.", "", LookupReceiverFunctions("")),
        ("", ".", NoCompletion()),
        ("x = ", "Blu", LookupRoot("Blu")),
    ],
)
def test_documented_scenarios(classifier, line_prefix, typed_prefix, expected):
    assert classifier.classify(line_prefix, typed_prefix) == expected


class TestSignaturePosition:
    """Parameter lists of declarations and line-start calls."""

    def test_open_paren_typed_after_declaration(self, classifier):
        assert classifier.classify("function Foo", "(") == EnumerateTypes(replacement_prefix="(")

    def test_comma_typed_inside_declaration(self, classifier):
        assert classifier.classify("function Foo(clip c", ", ") == EnumerateTypes(replacement_prefix=", ")

    def test_type_being_typed(self, classifier):
        assert classifier.classify("function Foo(clip c, ", "in") == LookupTypes("in")

    def test_type_after_open_paren(self, classifier):
        assert classifier.classify("  function Foo(", "cl") == LookupTypes("cl")

    def test_parameter_name_is_not_completed(self, classifier):
        assert classifier.classify("function Foo(clip ", "c") == NoCompletion()

    def test_declaration_name_is_not_completed(self, classifier):
        assert classifier.classify("function Foo", "") == NoCompletion()

    def test_closed_parameter_list_falls_through(self, classifier):
        assert classifier.classify("function Foo(clip c) { ", "Tr") == LookupRoot("Tr")


class TestOtherContexts:
    def test_dot_with_typed_prefix(self, classifier):
        assert classifier.classify("c = last.", "Tr") == LookupReceiverFunctions("Tr")

    def test_dot_with_trailing_space(self, classifier):
        assert classifier.classify("x = clip. ", "Bl") == LookupReceiverFunctions("Bl")

    def test_bare_dot_with_trailing_space(self, classifier):
        assert classifier.classify("x = clip", ". ") == NoCompletion()

    def test_assignment_is_root(self, classifier):
        assert classifier.classify("x = Trim(", "Blu") == LookupRoot("Blu")

    def test_empty_line(self, classifier):
        assert classifier.classify("", "") == LookupRoot("")


class ExplodingRule:
    def can_handle(self, request: CompletionRequest) -> bool:
        raise RuntimeError("boom")

    def classify(self, request: CompletionRequest):
        raise AssertionError("never called")


def test_failing_rule_is_skipped(log_messages):
    classifier = ContextClassifier([ExplodingRule(), RootRule()])

    assert classifier.classify("x = ", "Tr") == LookupRoot("Tr")
    assert any("ExplodingRule failed" in message for message in log_messages)


def test_no_rule_matching_defaults_to_root():
    assert ContextClassifier([]).classify("anything", "Av") == LookupRoot("Av")
