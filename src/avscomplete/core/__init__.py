"""Completion index and matching engine."""

from avscomplete.core.entry import CompletionEntry
from avscomplete.core.index import CompletionIndex
from avscomplete.core.loader import (
    BuildDiagnostic,
    CompletionIndices,
    IndexBuilder,
    build_indices,
    load_vocabulary,
)
from avscomplete.core.signature import Argument, Signature, parse_argument, parse_signature

__all__ = [
    "Argument",
    "Signature",
    "parse_argument",
    "parse_signature",
    "CompletionEntry",
    "CompletionIndex",
    "BuildDiagnostic",
    "CompletionIndices",
    "IndexBuilder",
    "build_indices",
    "load_vocabulary",
]
