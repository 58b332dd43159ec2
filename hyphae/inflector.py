"""Naming-convention translation between module names and class names."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


class Inflector:
    """Converts ``snake_case`` module names to ``CamelCase`` class names and back."""

    def underscore(self, name: str) -> str:
        word = name.replace("::", "/").replace("-", "_")
        word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
        word = _WORD_BOUNDARY.sub(r"\1_\2", word)
        return word.lower()

    def camelize(self, name: str) -> str:
        """``admin/user_repo`` -> ``Admin.UserRepo``."""
        parts = []
        for segment in re.split(r"[/.]", name):
            parts.append("".join(word[:1].upper() + word[1:] for word in segment.split("_") if word))
        return ".".join(p for p in parts if p)
