"""Two-language translation table.

A DictionaryTable is a frozen snapshot built by Dictionary.build_table():
every source-language word that has at least one translation into the
target language, mapped to those translations. It holds no reference to
the Dictionary it came from.
"""

from typing import Iterator, Mapping, Optional, Iterable

from .schema import Language, Word


class DictionaryTable:
    """Read-only mapping of source words to their translations."""

    def __init__(
        self,
        entries: Mapping[Word, Iterable[Word]],
        source: Optional[Language] = None,
        target: Optional[Language] = None,
    ):
        """Initialize table.

        Args:
            entries: Source word -> translations. Copied on construction.
            source: Source language of the table, if known.
            target: Target language of the table, if known.
        """
        self.source = source
        self.target = target
        self._entries: dict[Word, frozenset[Word]] = {
            word: frozenset(translations)
            for word, translations in entries.items()
        }

    def contains(self, word: Word) -> bool:
        return word in self._entries

    def translations(self, word: Word) -> Optional[set[Word]]:
        """Get the translations of a source word.

        Returns:
            A new set (possibly empty) if word is in the table, else None.
        """
        translations = self._entries.get(word)
        if translations is None:
            return None
        return set(translations)

    def is_empty(self) -> bool:
        return not self._entries

    def words(self) -> list[Word]:
        """Get source words in the order the table was built."""
        return list(self._entries)

    def size(self) -> int:
        return len(self._entries)

    def as_dict(self) -> dict[Word, set[Word]]:
        """Get a plain, independent copy of the table."""
        return {word: set(translations) for word, translations in self._entries.items()}

    def copy(self) -> "DictionaryTable":
        return DictionaryTable(self._entries, self.source, self.target)

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words())

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other) -> bool:
        if not isinstance(other, DictionaryTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return (
            f"DictionaryTable({self.source and self.source.code}"
            f" -> {self.target and self.target.code}: {self.size()} words)"
        )
