"""
Classifier that picks the completion context from the text before the cursor.
"""

from __future__ import annotations

from collections.abc import Sequence

from avscomplete.logger import get_logger

from .rules import default_rules
from .strategy import CompletionAction, CompletionRequest, ContextRule, LookupRoot

logger = get_logger("classifier")


class ContextClassifier:
    """Selects the first rule able to classify the current request."""

    def __init__(self, rules: Sequence[ContextRule] | None = None) -> None:
        self._rules = list(rules) if rules is not None else default_rules()

    def classify(self, line_prefix: str, typed_prefix: str) -> CompletionAction:
        request = CompletionRequest(line_prefix, typed_prefix)
        for rule in self._rules:
            try:
                if rule.can_handle(request):
                    action = rule.classify(request)
                    logger.debug("Rule {} classified {!r} as {}", rule.__class__.__name__, request, action)
                    return action
            except Exception:
                logger.exception("Context rule {} failed", rule.__class__.__name__)
        logger.debug("No context rule matched {!r}", request)
        return LookupRoot(typed_prefix)
