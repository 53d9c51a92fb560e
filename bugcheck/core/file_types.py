#!/usr/bin/env python3
"""
File type detection and language mapping.
"""

from pathlib import Path
from typing import Dict, Optional, Set

from .base_analyzer import Language

LANGUAGE_EXTENSIONS: Dict[Language, Set[str]] = {
    Language.JAVASCRIPT: {".js", ".jsx", ".mjs", ".cjs"},
    Language.PYTHON: {".py", ".pyi", ".pyw"},
    Language.JAVA: {".java"},
    Language.CPP: {".cpp", ".cxx", ".cc", ".c++", ".hpp", ".hxx", ".h++"},
    Language.C: {".c", ".h"},
    Language.PHP: {".php", ".php3", ".php4", ".php5", ".phtml"},
}


def detect_language(file_path: str) -> Optional[Language]:
    """Get the language for a file path from its extension."""
    extension = Path(file_path).suffix.lower()
    for language, extensions in LANGUAGE_EXTENSIONS.items():
        if extension in extensions:
            return language
    return None
