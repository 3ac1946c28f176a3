"""Language registry.

Holds the set of languages a Dictionary knows about. Languages are unique
by code: a second language with an already registered code is refused,
whatever its title.
"""

from enum import Enum
from typing import Iterator, Optional, Union
import logging

from .schema import Language

logger = logging.getLogger(__name__)


class SortKey(Enum):
    """Ordering used when listing languages."""

    CODE = "code"
    TITLE = "title"


class LanguageSet:
    """A set of languages keyed by code."""

    def __init__(self, seed: Language, *others: Language):
        """Initialize registry.

        Args:
            seed: First language; a registry is never created empty.
            others: Further languages. Codes already present are skipped.
        """
        # code -> Language, in insertion order
        self._langs: dict[str, Language] = {seed.code: seed}
        for language in others:
            self.add(language)

    def add(self, language: Language) -> bool:
        """Register a language.

        Returns:
            False if language is None or its code is already registered.
        """
        if language is None or language.code in self._langs:
            logger.debug("Conflict: language %s already registered", language)
            return False
        self._langs[language.code] = language
        return True

    def remove(self, code: Union[str, Language]) -> bool:
        """Unregister a language by code.

        Words of the language are not touched; Dictionary.remove_language
        takes care of them.
        """
        if isinstance(code, Language):
            code = code.code
        if not code or code not in self._langs:
            logger.debug("NotFound: no language with code %r", code)
            return False
        del self._langs[code]
        return True

    def rename(self, code: str, title: str) -> bool:
        """Change the title of a registered language."""
        language = self.get(code)
        if language is None or title is None:
            return False
        self._langs[code] = language.with_title(title)
        return True

    def contains(self, language: Union[str, Language, None]) -> bool:
        """Check if a language (or a bare code) is registered."""
        if isinstance(language, Language):
            language = language.code
        return bool(language) and language in self._langs

    def get(self, code: Optional[str]) -> Optional[Language]:
        """Get the registered language with this code."""
        if not code:
            return None
        return self._langs.get(code)

    def find_by_title(self, title: Optional[str]) -> Optional[set[Language]]:
        """Get all registered languages with this exact title."""
        if title is None:
            return None
        return {lang for lang in self._langs.values() if lang.title == title}

    def codes(self) -> list[str]:
        return sorted(self._langs)

    def sorted(self, by: SortKey = SortKey.CODE) -> list[Language]:
        """Get a sorted snapshot of the registry.

        Languages with equal titles keep their registration order when
        sorting by title.
        """
        if by is SortKey.TITLE:
            return sorted(self._langs.values(), key=lambda lang: lang.title)
        return sorted(self._langs.values())

    def sorted_by_code(self) -> list[Language]:
        return self.sorted(SortKey.CODE)

    def sorted_by_title(self) -> list[Language]:
        return self.sorted(SortKey.TITLE)

    def copy(self) -> "LanguageSet":
        # Bypass __init__: a registry can be emptied after creation
        clone = LanguageSet.__new__(LanguageSet)
        clone._langs = dict(self._langs)
        return clone

    def __contains__(self, language) -> bool:
        return self.contains(language)

    def __iter__(self) -> Iterator[Language]:
        return iter(self.sorted_by_code())

    def __len__(self) -> int:
        return len(self._langs)

    def __repr__(self) -> str:
        return f"LanguageSet({', '.join(self.codes())})"
