"""Runtime configuration for avscomplete."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from avscomplete.utils import default_vocabulary_path


@dataclass
class CompletionConfig:
    """Configuration for building and querying the completion indices."""

    # Vocabulary document to load at startup
    vocabulary_path: Path = default_vocabulary_path()

    # Overrides the document's own "wiki" base URL when set
    wiki_base_url: Optional[str] = None

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def load_config(env_file: Optional[str] = None) -> CompletionConfig:
    """Load configuration from environment variables (and ``.env`` if present).

    Args:
        env_file: Optional explicit path of a dotenv file

    Returns:
        CompletionConfig populated from ``AVSCOMPLETE_*`` variables
    """
    load_dotenv(env_file)

    vocabulary = os.getenv("AVSCOMPLETE_VOCABULARY", "")
    wiki_base_url = os.getenv("AVSCOMPLETE_WIKI_URL", "")

    return CompletionConfig(
        vocabulary_path=Path(vocabulary) if vocabulary else default_vocabulary_path(),
        wiki_base_url=wiki_base_url or None,
        log_level=os.getenv("AVSCOMPLETE_LOG_LEVEL", "WARNING").upper(),
        log_file=os.getenv("AVSCOMPLETE_LOG_FILE") or None,
    )
