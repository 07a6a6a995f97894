"""Vocabulary loading and index building.

Reads the vocabulary document and splits it into the three indices used at
query time:

- root: functions and variables usable as free identifiers
- receiver: functions whose first parameter is a clip, completed after a dot
- type: type names, completed inside a parameter list
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional

from pydantic import ValidationError

from avscomplete.core.entry import CompletionEntry
from avscomplete.core.index import CompletionIndex
from avscomplete.domain.exceptions import InvalidDefinition, VocabularyError
from avscomplete.domain.types import CompletionKind
from avscomplete.domain.vocabulary import VocabularyDocument
from avscomplete.logger import get_logger
from avscomplete.utils import default_vocabulary_path

logger = get_logger("loader")


def load_vocabulary(path: Optional[str | Path] = None) -> VocabularyDocument:
    """
    Load the vocabulary document from a JSON file.

    Args:
        path: Path to the JSON document. If None, the vocabulary bundled
            with the package is used.

    Returns:
        VocabularyDocument: Parsed document

    Raises:
        VocabularyError: If the file is missing, is not valid JSON, or does
            not have the expected structure
    """
    path = Path(path) if path is not None else default_vocabulary_path()

    if not path.exists():
        error_msg = f"Vocabulary file not found: {path}"
        logger.error(error_msg)
        raise VocabularyError(error_msg)

    logger.info("Loading vocabulary from: {}", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        error_msg = f"Invalid JSON in vocabulary file {path}: {e}"
        logger.error(error_msg)
        raise VocabularyError(error_msg, cause=e)

    if not isinstance(data, dict):
        raise VocabularyError(f"Vocabulary file {path} must contain a JSON object")

    try:
        document = VocabularyDocument(**data)
    except ValidationError as e:
        error_msg = f"Invalid vocabulary structure in {path}: {e}"
        logger.error(error_msg)
        raise VocabularyError(error_msg, cause=e)

    logger.info("Loaded vocabulary: {}", document.counts())
    return document


class DiagnosticKind(str, Enum):
    """What went wrong with a definition."""

    SKIPPED = "skipped"
    BAD_SIGNATURE = "bad_signature"
    ABBREVIATED = "abbreviated"


@dataclass(frozen=True, slots=True)
class BuildDiagnostic:
    """A load-time problem with one definition."""

    kind: DiagnosticKind
    collection: str
    name: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind != DiagnosticKind.ABBREVIATED


@dataclass(frozen=True)
class CompletionIndices:
    """The three indices, built together and read-only afterwards."""

    root: CompletionIndex
    receiver: CompletionIndex
    type: CompletionIndex
    diagnostics: tuple[BuildDiagnostic, ...] = field(default=())

    def summary(self) -> dict[str, int]:
        return {
            "root": len(self.root),
            "receiver": len(self.receiver),
            "type": len(self.type),
        }


class IndexBuilder:
    """Builds ``CompletionIndices`` from a vocabulary document.

    Bad definitions never abort the build: a definition without ``text`` is
    skipped, a malformed signature leaves its entry signature-less. Both are
    logged and kept as diagnostics.
    """

    def __init__(self, wiki_base_url: Optional[str] = None) -> None:
        self._wiki_base_url = wiki_base_url
        self._diagnostics: list[BuildDiagnostic] = []

    def build(self, document: VocabularyDocument) -> CompletionIndices:
        self._diagnostics = []
        wiki = self._wiki_base_url if self._wiki_base_url is not None else document.wiki

        root = CompletionIndex("root")
        receiver = CompletionIndex("receiver")
        types = CompletionIndex("type")

        for entry in self._entries(document.functions, CompletionKind.FUNCTION, wiki, "functions"):
            root.register(entry)
            if entry.takes_receiver:
                receiver.register(entry)
        for entry in self._entries(document.variables, CompletionKind.VARIABLE, wiki, "variables"):
            root.register(entry)
        for entry in self._entries(document.types, CompletionKind.TYPE, wiki, "types"):
            types.register(entry)

        indices = CompletionIndices(
            root=root,
            receiver=receiver,
            type=types,
            diagnostics=tuple(self._diagnostics),
        )
        logger.info("Built completion indices: {}", indices.summary())
        return indices

    def _entries(
        self,
        definitions: list[Any],
        kind: CompletionKind,
        wiki: Optional[str],
        collection: str,
    ) -> Iterator[CompletionEntry]:
        for position, definition in enumerate(definitions):
            try:
                entry = CompletionEntry.from_definition(definition, kind, wiki)
            except InvalidDefinition as e:
                logger.warning("Skipping {} definition #{}: {}", collection, position, e)
                self._diagnostics.append(
                    BuildDiagnostic(DiagnosticKind.SKIPPED, collection, f"#{position}", str(e))
                )
                continue

            if entry.signature_error is not None:
                self._diagnostics.append(
                    BuildDiagnostic(
                        DiagnosticKind.BAD_SIGNATURE,
                        collection,
                        entry.canonical_name,
                        f'Could not parse field "{entry.signature_error}"',
                    )
                )
            if entry.abbreviated and not isinstance(definition, str):
                self._diagnostics.append(
                    BuildDiagnostic(
                        DiagnosticKind.ABBREVIATED,
                        collection,
                        entry.canonical_name,
                        "Missing description",
                    )
                )
            yield entry


def build_indices(
    document: VocabularyDocument,
    wiki_base_url: Optional[str] = None,
) -> CompletionIndices:
    """Build the root, receiver and type indices from ``document``."""
    return IndexBuilder(wiki_base_url).build(document)
