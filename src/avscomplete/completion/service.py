"""
Completion service: the entry point host editors call on every keystroke.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from avscomplete.core.loader import CompletionIndices, build_indices, load_vocabulary
from avscomplete.domain.types import RenderContext, RenderedCompletion
from avscomplete.domain.vocabulary import VocabularyDocument
from avscomplete.logger import get_logger

from .classifier import ContextClassifier
from .strategy import (
    CompletionAction,
    EnumerateTypes,
    LookupReceiverFunctions,
    LookupRoot,
    LookupTypes,
    NoCompletion,
)

logger = get_logger("service")


class CompletionService:
    """Classifies the cursor context and queries the matching index.

    ``get_completions`` returns ``None`` when there is nothing to offer,
    either on purpose or because no name matched. Hosts use that to tell
    "no suggestions" apart from an empty list that would still let their
    fallback providers run.
    """

    def __init__(
        self,
        indices: CompletionIndices,
        classifier: ContextClassifier | None = None,
    ) -> None:
        self._indices = indices
        self._classifier = classifier or ContextClassifier()
        self._handlers: dict[type, Callable[..., list[RenderedCompletion]]] = {
            EnumerateTypes: self._enumerate_types,
            LookupTypes: self._lookup_types,
            LookupReceiverFunctions: self._lookup_receiver,
            LookupRoot: self._lookup_root,
        }

    @classmethod
    def from_vocabulary(
        cls,
        document: VocabularyDocument,
        wiki_base_url: str | None = None,
    ) -> CompletionService:
        return cls(build_indices(document, wiki_base_url))

    @classmethod
    def from_path(
        cls,
        path: str | Path | None = None,
        wiki_base_url: str | None = None,
    ) -> CompletionService:
        """Load a vocabulary file (the bundled one by default) and build a service."""
        return cls.from_vocabulary(load_vocabulary(path), wiki_base_url)

    @property
    def indices(self) -> CompletionIndices:
        return self._indices

    def reload(self, indices: CompletionIndices) -> None:
        """Swap in freshly built indices; the old ones are never mutated."""
        self._indices = indices
        logger.info("Completion indices reloaded: {}", indices.summary())

    def get_completions(self, line_prefix: str, typed_prefix: str) -> list[RenderedCompletion] | None:
        action = self._classifier.classify(line_prefix, typed_prefix)
        if isinstance(action, NoCompletion):
            return None

        # One read of the reference, so a concurrent reload cannot mix indices
        indices = self._indices
        completions = self._handlers[type(action)](indices, action)
        logger.debug("{} -> {} completion(s)", action, len(completions))
        return completions or None

    def _enumerate_types(self, indices: CompletionIndices, action: EnumerateTypes) -> list[RenderedCompletion]:
        return indices.type.enumerate_all(action.replacement_prefix)

    def _lookup_types(self, indices: CompletionIndices, action: LookupTypes) -> list[RenderedCompletion]:
        return indices.type.lookup(action.prefix)

    def _lookup_receiver(
        self, indices: CompletionIndices, action: LookupReceiverFunctions
    ) -> list[RenderedCompletion]:
        return indices.receiver.lookup(action.prefix, RenderContext.RECEIVER)

    def _lookup_root(self, indices: CompletionIndices, action: LookupRoot) -> list[RenderedCompletion]:
        return indices.root.lookup(action.prefix)
