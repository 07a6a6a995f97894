"""
Collation helpers for completion matching.

Names are compared case-insensitively but accent-sensitively: ``avisource``
matches ``AviSource`` while ``e`` never matches ``é``. Sorting follows the
same rule with base letters ordered first and accents only breaking ties,
so ``Élan`` sorts between ``Echo`` and ``Fade`` rather than after ``Z``.
"""

from __future__ import annotations

import unicodedata


def fold(text: str) -> str:
    """Case-fold ``text`` in composed form; accents are preserved."""
    return unicodedata.normalize("NFC", text).casefold()


def collates_equal(left: str, right: str) -> bool:
    """True when the strings differ at most in case."""
    return fold(left) == fold(right)


def prefix_matches(prefix: str, candidate: str) -> bool:
    """
    Check whether ``candidate`` starts with ``prefix`` under collation.

    Args:
        prefix: What the user typed
        candidate: A full completion name

    Returns:
        True if the first ``len(prefix)`` characters of ``candidate``
        collate equal to ``prefix``
    """
    prefix = unicodedata.normalize("NFC", prefix)
    candidate = unicodedata.normalize("NFC", candidate)
    if len(candidate) < len(prefix):
        return False
    return collates_equal(candidate[: len(prefix)], prefix)


def collation_key(text: str) -> tuple[str, str]:
    """Sort key: accent-stripped folded text, then the accented folded text."""
    decomposed = unicodedata.normalize("NFD", text.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, decomposed
