"""
The context rules, in precedence order.

The cursor can be:

* inside a parameter list being declared (``function Name(`` or a bare
  ``Name(`` at line start), where types are completed
* right after a ``.``, where only functions taking a clip apply
* on a bare ``.`` with nothing typed yet
* anywhere else, where all functions and variables apply
"""

from __future__ import annotations

import re

from avscomplete.logger import get_logger

from .strategy import (
    CompletionAction,
    CompletionRequest,
    ContextRule,
    EnumerateTypes,
    LookupReceiverFunctions,
    LookupRoot,
    LookupTypes,
    NoCompletion,
)

logger = get_logger("classifier.rules")

_DECLARATION_HEAD = re.compile(r"^\s*function\s+\w+\s*(?:\([^)]*)?$")
_CALL_HEAD = re.compile(r"^\s*\w+\s*\([^)]*$")
_OPEN_PARAMETER = re.compile(r"[(,]\s*$")
_PARAMETER_TRIGGER = re.compile(r"^\s*(?:\(|,\s)\s*$")
_TRAILING_DOT = re.compile(r"\.\s*$")
_BARE_DOT = re.compile(r"^\.\s*$")


class SignaturePositionRule(ContextRule):
    """Types inside a parameter list."""

    def can_handle(self, request: CompletionRequest) -> bool:
        line = request.line_prefix
        return bool(_DECLARATION_HEAD.match(line) or _CALL_HEAD.match(line))

    def classify(self, request: CompletionRequest) -> CompletionAction:
        typed = request.typed_prefix
        at_parameter = _OPEN_PARAMETER.search(request.line_prefix) is not None

        if _PARAMETER_TRIGGER.match(typed) or (not typed and at_parameter):
            return EnumerateTypes(replacement_prefix=typed or None)
        if at_parameter:
            return LookupTypes(typed)
        # A parameter name is being typed
        return NoCompletion()


class ReceiverDotRule(ContextRule):
    """Functions taking a clip, after ``clip.``."""

    def can_handle(self, request: CompletionRequest) -> bool:
        return _TRAILING_DOT.search(request.line_prefix) is not None

    def classify(self, request: CompletionRequest) -> CompletionAction:
        return LookupReceiverFunctions(request.typed_prefix)


class BareDotRule(ContextRule):
    """A dot typed with nothing after it.

    This could offer the most likely clip functions; for now it offers nothing.
    """

    def can_handle(self, request: CompletionRequest) -> bool:
        return _BARE_DOT.match(request.typed_prefix) is not None

    def classify(self, request: CompletionRequest) -> CompletionAction:
        return NoCompletion()


class RootRule(ContextRule):
    """Everything else: free identifiers."""

    def can_handle(self, request: CompletionRequest) -> bool:
        return True

    def classify(self, request: CompletionRequest) -> CompletionAction:
        return LookupRoot(request.typed_prefix)


def default_rules() -> list[ContextRule]:
    return [SignaturePositionRule(), ReceiverDotRule(), BareDotRule(), RootRule()]
