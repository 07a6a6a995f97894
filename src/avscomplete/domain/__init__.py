"""Domain types shared by the index, the classifier and the host adapters."""

from avscomplete.domain.exceptions import (
    CompletionError,
    InvalidDefinition,
    MalformedArgument,
    VocabularyError,
)
from avscomplete.domain.types import CompletionKind, RenderContext, RenderedCompletion
from avscomplete.domain.vocabulary import VocabularyDocument

__all__ = [
    "CompletionError",
    "InvalidDefinition",
    "MalformedArgument",
    "VocabularyError",
    "CompletionKind",
    "RenderContext",
    "RenderedCompletion",
    "VocabularyDocument",
]
