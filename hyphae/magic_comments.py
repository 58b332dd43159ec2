"""Per-file component options read from a module's leading comments.

A source file may override its component dir's defaults with comments
before the first statement::

    # auto_register: false
    # memoize: true

    class Mailer: ...
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import tree_sitter
import tree_sitter_python as ts_python

logger = logging.getLogger(__name__)

COMMENT_RE = re.compile(r"^#\s+(?P<name>[A-Za-z][A-Za-z0-9_]+):\s+(?P<value>.+?)\s*$")

COERCIONS: dict[str, Any] = {
    "true": True,
    "false": False,
}

_parser: tree_sitter.Parser | None = None


def _get_parser() -> tree_sitter.Parser | None:
    global _parser
    if _parser is None:
        try:
            _parser = tree_sitter.Parser(tree_sitter.Language(ts_python.language()))
        except (RuntimeError, ValueError) as e:
            logger.warning(f"Failed to initialise Python parser: {e}")
            return None
    return _parser


def _leading_comments(tree: tree_sitter.Tree) -> list[str]:
    comments = []
    for child in tree.root_node.children:
        if child.type != "comment":
            break
        comments.append(child.text.decode("utf-8", errors="replace"))
    return comments


def parse_magic_comments(file_path: str | Path) -> dict[str, Any]:
    """Return the options declared in the leading comments of ``file_path``."""
    parser = _get_parser()
    if parser is None:
        return {}

    source = Path(file_path).read_bytes()
    tree = parser.parse(source)

    options: dict[str, Any] = {}
    for comment in _leading_comments(tree):
        match = COMMENT_RE.match(comment)
        if match:
            value = match.group("value")
            options[match.group("name")] = COERCIONS.get(value, value)

    if options:
        logger.debug(f"Magic comments in {file_path}: {options}")
    return options
