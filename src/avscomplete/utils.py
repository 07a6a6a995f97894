"""
Utility functions for the avscomplete package.
"""

import os
from pathlib import Path


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/avscomplete).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def default_vocabulary_path() -> Path:
    """
    Path of the vocabulary document shipped with the package.

    Returns:
        Path to ``data/completions.json`` inside the installed package
    """
    return Path(__file__).parent / "data" / "completions.json"
