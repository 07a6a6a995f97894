"""Vocabulary document model.

The document is produced by an external loader (usually a JSON file) and
consumed exactly once, when the indices are built. Individual definitions
are kept loose here: a malformed definition must only drop itself, so each
one is validated when it becomes a ``CompletionEntry``.
"""

from typing import Any, Union

from pydantic import BaseModel, Field

Definition = Union[str, dict[str, Any]]


class VocabularyDocument(BaseModel):
    """Functions, variables and types of the scripting language."""

    functions: list[Any] = Field(default_factory=list, description="Function definitions")
    variables: list[Any] = Field(default_factory=list, description="Variable definitions")
    types: list[Any] = Field(default_factory=list, description="Type definitions")
    wiki: str = Field(default="", description="Base URL for documentation links")

    def counts(self) -> dict[str, int]:
        """Number of raw definitions per collection."""
        return {
            "functions": len(self.functions),
            "variables": len(self.variables),
            "types": len(self.types),
        }

    class Config:
        """Pydantic configuration."""

        frozen = True
