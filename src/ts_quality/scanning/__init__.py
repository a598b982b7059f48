"""Syntax-tree provider: tree-sitter parsing plus the SyntaxNode adapter."""

from __future__ import annotations

from functools import lru_cache

from ..exceptions import UnsupportedLanguageError
from .syntax import NodeKind, SourceTree, SyntaxNode
from .treesitter_parser import (
    EXTENSION_LANGUAGES,
    TreeSitterParser,
    detect_language,
    get_supported_extensions,
    get_supported_languages,
)


@lru_cache(maxsize=1)
def default_parser() -> TreeSitterParser:
    """Process-wide parser, built on first use."""
    return TreeSitterParser()


def parse_source(
    code: str,
    path: str = "<memory>",
    language: str = "typescript",
    parser: TreeSitterParser | None = None,
) -> SourceTree:
    """Parse TypeScript source text into a SourceTree.

    Raises:
        UnsupportedLanguageError: If ``language`` has no grammar
    """
    parser = parser or default_parser()
    tree = parser.parse(code.encode("utf-8", errors="replace"), language)
    if tree is None:
        raise UnsupportedLanguageError(language, get_supported_languages())
    return SourceTree(path, language, tree)


__all__ = [
    "EXTENSION_LANGUAGES",
    "NodeKind",
    "SourceTree",
    "SyntaxNode",
    "TreeSitterParser",
    "default_parser",
    "detect_language",
    "get_supported_extensions",
    "get_supported_languages",
    "parse_source",
]
