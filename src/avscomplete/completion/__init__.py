"""
Context classification and the completion service.

The classifier is a list of ordered rules; the first rule that recognises
the text before the cursor decides which index the service queries.
"""

from .strategy import (
    CompletionAction,
    CompletionRequest,
    ContextRule,
    EnumerateTypes,
    LookupReceiverFunctions,
    LookupRoot,
    LookupTypes,
    NoCompletion,
)
from .rules import BareDotRule, ReceiverDotRule, RootRule, SignaturePositionRule, default_rules
from .classifier import ContextClassifier
from .service import CompletionService

__all__ = [
    "CompletionAction",
    "CompletionRequest",
    "ContextRule",
    "EnumerateTypes",
    "LookupReceiverFunctions",
    "LookupRoot",
    "LookupTypes",
    "NoCompletion",
    "BareDotRule",
    "ReceiverDotRule",
    "RootRule",
    "SignaturePositionRule",
    "default_rules",
    "ContextClassifier",
    "CompletionService",
]
