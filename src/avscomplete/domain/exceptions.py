"""avscomplete exception hierarchy.

Every exception here is raised while the indices are built from the
vocabulary. Queries never raise.
"""

from typing import Any


class CompletionError(Exception):
    """Base exception for all avscomplete errors.

    Wraps original errors as __cause__ for proper exception chaining.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class MalformedArgument(CompletionError):
    """Raised when one comma-separated field of a signature does not parse."""

    def __init__(self, field: str, cause: Exception | None = None):
        super().__init__(f'Could not parse field "{field}"', cause=cause)
        self.field = field


class InvalidDefinition(CompletionError):
    """Raised when a vocabulary record cannot become a completion entry.

    Examples: a record without ``text``, an empty alias list, a definition
    that is neither a name nor a mapping.
    """

    def __init__(self, message: str, *, definition: Any = None, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.definition = definition


class VocabularyError(CompletionError):
    """Raised when the vocabulary document itself cannot be read or validated."""

    pass
