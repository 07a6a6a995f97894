"""
avscomplete

Code completion for AviSynth-style scripts. A fixed vocabulary of
functions, variables and types is loaded once into three letter-bucketed
indices; every keystroke is classified from the text before the cursor
and answered from the matching index.

Example Usage:
    from avscomplete import CompletionService

    service = CompletionService.from_path()
    for completion in service.get_completions("x = clip.", "Tr") or []:
        print(completion.insertion)
"""

from avscomplete.completion import ContextClassifier, CompletionService
from avscomplete.core import CompletionEntry, CompletionIndex, build_indices, load_vocabulary
from avscomplete.domain import CompletionKind, RenderedCompletion

__version__ = "0.1.0"
__all__ = [
    "CompletionService",
    "ContextClassifier",
    "CompletionEntry",
    "CompletionIndex",
    "build_indices",
    "load_vocabulary",
    "CompletionKind",
    "RenderedCompletion",
]
