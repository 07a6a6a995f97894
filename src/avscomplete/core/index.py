"""
Completion index.

Entries are bucketed by the lowercase first letter of each of their names,
so a lookup only has to test the handful of entries sharing the prefix's
initial. Several indices are expected to exist side by side, one per
completion context.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from avscomplete.core.collation import collation_key, fold
from avscomplete.core.entry import CompletionEntry
from avscomplete.domain.types import RenderContext, RenderedCompletion
from avscomplete.logger import get_logger

logger = get_logger("index")


class CompletionIndex:
    """Letter-bucketed collection of completion entries."""

    def __init__(self, name: str = "index") -> None:
        self.name = name
        # first letter -> entries, in registration order
        self._buckets: dict[str, list[CompletionEntry]] = {}
        self._entries: list[CompletionEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CompletionEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        folded = fold(name)
        return any(fold(entry.canonical_name) == folded for entry in self._entries)

    @property
    def entries(self) -> tuple[CompletionEntry, ...]:
        return tuple(self._entries)

    def bucket(self, letter: str) -> tuple[CompletionEntry, ...]:
        """Entries registered under ``letter`` (case-insensitive)."""
        return tuple(self._buckets.get(letter[:1].lower(), ()))

    def register(self, entry: CompletionEntry) -> None:
        """
        Register an entry under the initial letter of each of its names.

        An entry is added to a given bucket only once, even when several of
        its aliases share that initial.
        """
        letters: set[str] = set()
        for name in entry.names:
            letter = name[0].lower()
            if letter in letters:
                continue
            letters.add(letter)
            self._buckets.setdefault(letter, []).append(entry)
        self._entries.append(entry)

    def lookup(
        self,
        prefix: str,
        context: RenderContext = RenderContext.ROOT,
    ) -> list[RenderedCompletion]:
        """
        Find the completions whose names start with ``prefix``.

        Args:
            prefix: Typed fragment; an empty prefix yields no results
            context: Template selection for entries with a signature

        Returns:
            Matching completions sorted by their insertion text
        """
        if not prefix:
            return []

        bucket = self._buckets.get(prefix[0].lower())
        if not bucket:
            logger.debug("{}: no bucket for prefix {!r}", self.name, prefix)
            return []

        completions = []
        for entry in bucket:
            rendered = entry.match_against(prefix, context)
            if rendered is not None:
                completions.append(rendered)

        # Buckets keep load order; display order is alphabetical
        completions.sort(key=lambda completion: collation_key(completion.insertion))
        logger.debug("{}: {} match(es) for {!r}", self.name, len(completions), prefix)
        return completions

    def enumerate_all(self, replacement_prefix: str | None = None) -> list[RenderedCompletion]:
        """
        Render every entry under its canonical name, unfiltered.

        Args:
            replacement_prefix: When given, stamped on every result so the
                editor knows which span to replace

        Returns:
            One completion per registered entry, in registration order
        """
        completions = [entry.render() for entry in self._entries]
        if replacement_prefix is not None:
            completions = [
                dataclasses.replace(completion, replacement_prefix=replacement_prefix)
                for completion in completions
            ]
        return completions
