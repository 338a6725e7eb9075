"""Languages available for user-facing messages.

Lives in the domain layer so settings, the message catalog and the CLI can
share it without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported languages for countdown and error messages."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def from_code(cls, code: str | None) -> "Language":
        """Map a locale-ish code (`es`, `ES`, `es_AR.UTF-8`) to a language.

        Empty codes give the default language.

        Raises:
            ValueError: the code names an unsupported language.
        """

        if not code or not code.strip():
            return cls.default()
        prefix = code.strip().lower().replace("-", "_").split("_", 1)[0].split(".", 1)[0]
        for language in cls:
            if language.value == prefix:
                return language
        raise ValueError(f"unsupported language: {code}")

    def label(self) -> str:
        """Human readable label for diagnostics."""

        return "Spanish" if self is Language.SPANISH else "English"
