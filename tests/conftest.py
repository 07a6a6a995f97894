"""Shared fixtures for avscomplete tests."""

import pytest
from loguru import logger

from avscomplete.completion.service import CompletionService
from avscomplete.core.loader import build_indices
from avscomplete.domain.vocabulary import VocabularyDocument

WIKI = "http://avisynth.nl/index.php/"


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def document() -> VocabularyDocument:
    return VocabularyDocument(
        wiki=WIKI,
        functions=[
            {
                "text": "AviSource",
                "description": "Opens an AVI file.",
                "signature": "string filename, bool audio=true",
                "returns": "clip",
            },
            {
                "text": ["BlankClip", "Blackness"],
                "description": "Solid color clip.",
                "signature": "clip clip, int length=240",
                "returns": "clip",
            },
            {
                "text": "Blur",
                "description": "Blurs a clip.",
                "signature": "clip clip, float amount",
                "returns": "clip",
            },
            {
                "text": "Trim",
                "description": "Trims a clip.",
                "signature": "clip clip, int first_frame, int last_frame",
                "returns": "clip",
            },
            {
                "text": "Import",
                "description": "Evaluates another script.",
                "signature": "string filename ...",
                "returns": "val",
            },
        ],
        variables=[
            {"text": "last", "description": "The implicit last clip."},
            "true",
        ],
        types=[
            {"text": "clip", "description": "A clip."},
            {"text": "int", "description": "A whole number."},
            {"text": "bool", "description": "True or false."},
        ],
    )


@pytest.fixture
def indices(document):
    return build_indices(document)


@pytest.fixture
def service(indices) -> CompletionService:
    return CompletionService(indices)
