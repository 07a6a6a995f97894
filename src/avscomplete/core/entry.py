"""
Completion entries.

An entry wraps one vocabulary item (function, variable or type). The JSON
definition of an entry is either a bare name or a record:

``text``
    A name, or a list of aliases in order of "correctness". The first alias
    is canonical. If several aliases match a prefix only the earliest one is
    completed.
``description``
    Text displayed in the description field.
``signature``
    Parameter list (see ``avscomplete.core.signature``); a list of
    alternatives keeps only the first.
``returns``
    What the function returns, shown as the left label.
``wiki``
    Documentation page. ``True`` or absent links to the canonical name,
    a string links to that page, ``False`` means there is no page.
``descriptionMoreURL``
    Explicit documentation URL, overriding ``wiki``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from avscomplete.core.collation import prefix_matches
from avscomplete.core.signature import Signature, parse_signature
from avscomplete.domain.exceptions import InvalidDefinition, MalformedArgument
from avscomplete.domain.types import CompletionKind, RenderContext, RenderedCompletion
from avscomplete.domain.vocabulary import Definition
from avscomplete.logger import get_logger

logger = get_logger("entry")


@dataclass(frozen=True, slots=True)
class CompletionEntry:
    """One vocabulary item. Immutable once built; indices share it read-only."""

    names: tuple[str, ...]
    kind: CompletionKind
    description: str
    more_info_url: str | None = None
    return_label: str | None = None
    signature: Signature | None = None
    # Diagnostics only, never used for ranking
    abbreviated: bool = False
    signature_error: str | None = None

    def __post_init__(self) -> None:
        if not self.names:
            raise InvalidDefinition("A completion entry needs at least one name")

    @property
    def canonical_name(self) -> str:
        return self.names[0]

    @property
    def takes_receiver(self) -> bool:
        return self.signature is not None and self.signature.takes_receiver

    @classmethod
    def from_definition(
        cls,
        definition: Definition,
        kind: CompletionKind,
        doc_base_url: str | None,
    ) -> CompletionEntry:
        """
        Build an entry from a vocabulary definition.

        Args:
            definition: A bare name or a definition record
            kind: Category of the collection the definition came from
            doc_base_url: Base URL documentation page names are appended to

        Returns:
            The built CompletionEntry. A signature that fails to parse is
            logged and dropped; the entry then inserts plain text.

        Raises:
            InvalidDefinition: If the definition has no usable ``text``
        """
        if isinstance(definition, str):
            names = _names_from(definition, definition)
            return cls(
                names=names,
                kind=kind,
                description=_generated_description(kind, names[0]),
                more_info_url=_doc_url(doc_base_url, names[0]),
                abbreviated=True,
            )

        if not isinstance(definition, Mapping) or "text" not in definition:
            raise InvalidDefinition(f"Bad completion definition {definition!r}", definition=definition)

        names = _names_from(definition["text"], definition)

        abbreviated = definition.get("description") is None
        if abbreviated:
            description = _generated_description(kind, names[0])
            logger.warning("Missing description for {}", names[0])
        else:
            description = str(definition["description"])

        wiki = definition.get("wiki", True)
        if wiki is False:
            # There is legitimately no documentation page for this one
            more_info_url = None
        elif isinstance(wiki, str):
            more_info_url = _doc_url(doc_base_url, wiki)
        else:
            more_info_url = _doc_url(doc_base_url, names[0])
        if "descriptionMoreURL" in definition:
            more_info_url = definition["descriptionMoreURL"]

        signature = None
        signature_error = None
        if "signature" in definition:
            try:
                signature = parse_signature(definition["signature"])
            except MalformedArgument as e:
                signature_error = e.field
                logger.warning(
                    "Dropping signature of {}: could not parse field {!r}",
                    names[0],
                    e.field,
                )

        returns = definition.get("returns")
        return cls(
            names=names,
            kind=kind,
            description=description,
            more_info_url=more_info_url,
            return_label=str(returns) if returns is not None else None,
            signature=signature,
            abbreviated=abbreviated,
            signature_error=signature_error,
        )

    def match_against(
        self,
        prefix: str,
        context: RenderContext = RenderContext.ROOT,
    ) -> RenderedCompletion | None:
        """
        Render this entry if one of its names starts with ``prefix``.

        Only the first matching alias is rendered, later matching aliases
        are suppressed.
        """
        for name in self.names:
            if prefix_matches(prefix, name):
                return self.render(name, context)
        return None

    def render(
        self,
        name: str | None = None,
        context: RenderContext = RenderContext.ROOT,
    ) -> RenderedCompletion:
        """Render under ``name`` (canonical by default) for the given context."""
        name = name or self.canonical_name
        if self.signature is not None:
            template = self.signature.template_for(context == RenderContext.RECEIVER)
            return RenderedCompletion(
                kind=self.kind,
                description=self.description,
                snippet=name + template,
                more_info_url=self.more_info_url,
                left_label=self.return_label,
            )
        return RenderedCompletion(
            kind=self.kind,
            description=self.description,
            text=name,
            more_info_url=self.more_info_url,
            left_label=self.return_label,
        )


def _names_from(text: Any, definition: Any) -> tuple[str, ...]:
    aliases = [text] if isinstance(text, str) else text
    if not isinstance(aliases, (list, tuple)) or not aliases:
        raise InvalidDefinition(f"Bad completion text in {definition!r}", definition=definition)
    if not all(isinstance(alias, str) and alias for alias in aliases):
        raise InvalidDefinition(f"Completion names must be non-empty strings in {definition!r}", definition=definition)
    # Ordered set: duplicates keep their first position
    return tuple(dict.fromkeys(aliases))


def _generated_description(kind: CompletionKind, name: str) -> str:
    return f"AviSynth built-in {kind.value} {name}"


def _doc_url(base: str | None, page: str) -> str | None:
    if not base:
        return None
    return base + page
