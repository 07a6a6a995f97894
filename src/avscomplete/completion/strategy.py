"""
Context rule interfaces and the actions they produce.

Each rule recognises one lexical context around the cursor and turns it
into an action telling the service which index to query and how.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """Plain-string snapshot of the cursor context."""

    line_prefix: str
    typed_prefix: str


@dataclass(frozen=True, slots=True)
class EnumerateTypes:
    """Offer every type, unfiltered."""

    replacement_prefix: str | None = None


@dataclass(frozen=True, slots=True)
class LookupTypes:
    prefix: str


@dataclass(frozen=True, slots=True)
class LookupReceiverFunctions:
    prefix: str


@dataclass(frozen=True, slots=True)
class LookupRoot:
    prefix: str


@dataclass(frozen=True, slots=True)
class NoCompletion:
    """Deliberately offer nothing."""


CompletionAction = Union[EnumerateTypes, LookupTypes, LookupReceiverFunctions, LookupRoot, NoCompletion]


class ContextRule(Protocol):
    """Contract implemented by all context rules."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this rule recognises the context."""

        ...

    def classify(self, request: CompletionRequest) -> CompletionAction:
        """Return the action for a request this rule handles."""

        ...
