"""Language and Word value types for lexigraph.

Core concept:
    - A Language is identified by its code ("en", "ru", ...)
    - A Word is a (text, language) pair and is the node key of the graph
    - Both are immutable values, so they can be shared freely

Example:
    en = Language("en", "English")
    Word("build", en) == Word("build", Language("en", "Anglais"))  # True
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from .exceptions import ValidationError

# Text stored for a Word created without text
PLACEHOLDER_TEXT = "no word"


@dataclass(frozen=True, order=True)
class Language:
    """A natural language, identified by its code.

    Equality, hashing and ordering use the code only. The title is
    descriptive and can be changed through with_title().
    """

    code: str
    title: str = field(default="", compare=False)

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code:
            raise ValidationError(f"Invalid language code: {self.code!r}")
        if self.title is None:
            object.__setattr__(self, "title", "")

    def with_title(self, title: str) -> "Language":
        """Return a copy of this language with a new title."""
        if title is None:
            raise ValidationError(f"Invalid title for language {self.code!r}")
        return replace(self, title=title)

    def same_code(self, other: "Language") -> bool:
        return other is not None and self.code == other.code

    def __str__(self) -> str:
        return f"{self.code} ({self.title})" if self.title else self.code


@dataclass(frozen=True, order=True)
class Word:
    """A word in a given language.

    Empty text is replaced with PLACEHOLDER_TEXT instead of being rejected.
    """

    text: str
    language: Language

    def __post_init__(self):
        if not self.text:
            object.__setattr__(self, "text", PLACEHOLDER_TEXT)
        if not isinstance(self.language, Language):
            raise ValidationError(
                f"Word {self.text!r} needs a Language, got {self.language!r}"
            )

    @property
    def code(self) -> str:
        """Code of the word's language."""
        return self.language.code

    def with_text(self, text: Optional[str]) -> "Word":
        """Return a copy of this word with new text.

        Unlike the constructor, empty text is refused here.
        """
        if not text:
            raise ValidationError("Word text must not be empty")
        return replace(self, text=text)

    def with_language(self, language: Language) -> "Word":
        return replace(self, language=language)

    def __str__(self) -> str:
        return f"{self.text} [{self.language.code}]"
