"""Tree-sitter parser wrapper.

Loads the two grammars shipped by tree-sitter-typescript and maps file
extensions onto them.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "typescript")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tree_sitter
import tree_sitter_typescript

# Grammar name -> factory returning the raw language pointer
_LANGUAGE_FACTORIES = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

# .tsx needs the JSX-aware grammar; plain .ts must not use it because
# `<T>value` assertions are ambiguous with JSX.
EXTENSION_LANGUAGES = {
    ".ts": "typescript",
    ".tsx": "tsx",
}


def get_supported_languages() -> list[str]:
    """Get list of grammar names this parser can load."""
    return list(_LANGUAGE_FACTORIES)


def get_supported_extensions() -> list[str]:
    """Get list of file extensions that map onto a grammar."""
    return list(EXTENSION_LANGUAGES)


def detect_language(path: Path) -> str | None:
    """Return the grammar name for a file path, or None if unsupported."""
    return EXTENSION_LANGUAGES.get(path.suffix.lower())


class TreeSitterParser:
    """Wrapper around tree-sitter for the TypeScript grammars.

    One parser instance per grammar is created up front and reused for
    every file.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Any] = {}
        self._languages: dict[str, Any] = {}

        for lang_name, factory in _LANGUAGE_FACTORIES.items():
            # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
            lang_obj = tree_sitter.Language(factory())
            self._parsers[lang_name] = tree_sitter.Parser(lang_obj)
            self._languages[lang_name] = lang_obj

    def parse(self, code: bytes, language: str) -> tree_sitter.Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Grammar name ("typescript" or "tsx")

        Returns:
            Tree object, or None if the language is not supported. A tree is
            returned even for malformed code; check ``root_node.has_error``.
        """
        parser = self._parsers.get(language)
        if parser is None:
            return None
        return parser.parse(code)

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
