"""Translation graph.

A Dictionary owns a LanguageSet and maps every known Word to the set of
Words it translates to. The relation is kept symmetric: adding a
translation A -> B also records B -> A, and removing a word removes every
edge touching it.

Invariants, checked by check_integrity():
    - every word belongs to a registered language
    - if B is a translation of A, A is a translation of B
    - no translation points at a word that is not in the dictionary

Failures never raise; every operation returns False (or None for queries)
and leaves the dictionary untouched.

Example:
    en = Language("en", "English")
    ru = Language("ru", "Russian")
    d = Dictionary(en)
    d.add_language(ru)
    d.add_word("build", en)
    d.add_translation(Word("build", en), "строить", ru)
    d.build_table(ru, en).translations(Word("строить", ru))
    # {Word(text='build', ...)}
"""

from typing import Callable, Optional, Union
import logging

from .languages import LanguageSet
from .schema import Language, Word
from .table import DictionaryTable
from .exceptions import IntegrityError

logger = logging.getLogger(__name__)

LanguageRef = Union[Language, str]
WordRef = Union[Word, str]


class Dictionary:
    """In-memory multilingual translation dictionary."""

    def __init__(self, seed: Language):
        """Initialize dictionary.

        Args:
            seed: First registered language.
        """
        self._langs = LanguageSet(seed)
        # word -> its translations
        self._words: dict[Word, set[Word]] = {}

    @classmethod
    def from_code(cls, code: str, title: str = "") -> "Dictionary":
        """Create a dictionary seeded with a new language."""
        return cls(Language(code, title))

    # -------------------------------------------------------------------------
    # Languages
    # -------------------------------------------------------------------------

    @property
    def languages(self) -> LanguageSet:
        """Copy of the language registry."""
        return self._langs.copy()

    def add_language(self, language: LanguageRef, title: str = "") -> bool:
        """Register a language, given as a Language or as a code and title."""
        if isinstance(language, str):
            if not language:
                logger.debug("InvalidArgument: empty language code")
                return False
            language = Language(language, title)
        if not self._langs.add(language):
            return False
        logger.info("Added language %s", language)
        return True

    def remove_language(self, language: LanguageRef) -> bool:
        """Unregister a language and delete all of its words."""
        found = self._language(language)
        if found is None:
            logger.debug("UnregisteredLanguage: %s", language)
            return False

        doomed = [w for w in self._words if w.code == found.code]
        for word in doomed:
            self.remove_word(word)

        self._langs.remove(found.code)
        logger.info("Removed language %s with %d words", found, len(doomed))
        return True

    def rename_language(self, code: str, title: str) -> bool:
        """Change a language's title.

        Words of that language are re-bound to the renamed Language so
        that they report the new title.
        """
        if not self._langs.rename(code, title):
            return False

        language = self._langs.get(code)

        def rebind(word: Word) -> Word:
            if word.code == code:
                return word.with_language(language)
            return word

        # Equal keys are not replaced in place by dict assignment, so rebuild
        self._words = {
            rebind(word): {rebind(t) for t in translations}
            for word, translations in self._words.items()
        }
        logger.info("Renamed language %s", language)
        return True

    # -------------------------------------------------------------------------
    # Words
    # -------------------------------------------------------------------------

    def add_word(self, word: WordRef, language: Optional[LanguageRef] = None) -> bool:
        """Add a word without translations.

        Args:
            word: A Word, or the word's text when language is given.
            language: Language of a text word.

        Returns:
            False if the word is invalid, its language is not registered,
            or it is already in the dictionary.
        """
        word = self._coerce(word, language)
        if word is None:
            return False
        if not self._langs.contains(word.language):
            logger.debug("UnregisteredLanguage: cannot add %s", word)
            return False
        if word in self._words:
            logger.debug("Conflict: %s already in dictionary", word)
            return False

        self._words[self._canonical(word)] = set()
        return True

    def remove_word(self, word: WordRef, language: Optional[LanguageRef] = None) -> bool:
        """Remove a word and every translation edge touching it."""
        word = self._coerce(word, language)
        if word is None or word not in self._words:
            logger.debug("NotFound: %s", word)
            return False

        for translation in self._words[word]:
            self._words[translation].discard(word)
        del self._words[word]
        return True

    def contains(self, word: Word) -> bool:
        return word in self._words

    def words(self) -> set[Word]:
        return set(self._words)

    def words_for_language(self, language: LanguageRef) -> Optional[set[Word]]:
        """Get all words of a language.

        Returns:
            A new set of words, or None if the language is not registered.
        """
        found = self._language(language)
        if found is None:
            return None
        return {w for w in self._words if w.code == found.code}

    # -------------------------------------------------------------------------
    # Translations
    # -------------------------------------------------------------------------

    def add_translation(
        self,
        word: Word,
        translation: WordRef,
        language: Optional[LanguageRef] = None,
    ) -> bool:
        """Link two words as translations of each other.

        The source word must already be in the dictionary. The translation
        is added to the dictionary if missing. Either both directions are
        recorded or nothing changes.

        Args:
            word: Existing word to translate.
            translation: Translation Word, or its text when language is given.
            language: Language of a text translation.
        """
        translation = self._coerce(translation, language)
        if not isinstance(word, Word) or translation is None:
            return False
        if not (self._langs.contains(word.language)
                and self._langs.contains(translation.language)):
            logger.debug("UnregisteredLanguage: %s -> %s", word, translation)
            return False
        if word == translation:
            logger.debug("InvalidArgument: %s cannot translate itself", word)
            return False
        if word not in self._words:
            logger.debug("NotFound: %s is not in the dictionary", word)
            return False

        undo: list[Callable[[], None]] = []
        if self._link(word, translation, undo):
            return True

        for step in reversed(undo):
            step()
        return False

    def _link(self, word: Word, translation: Word, undo: list) -> bool:
        """Apply the steps of add_translation, recording how to revert each."""
        if translation not in self._words:
            canonical = self._canonical(translation)
            self._words[canonical] = set()
            undo.append(lambda: self._words.pop(canonical, None))

        forward = self._words[word]
        if translation in forward:
            logger.debug("Conflict: %s -> %s already exists", word, translation)
            return False
        forward.add(self._canonical(translation))
        undo.append(lambda: forward.discard(translation))

        reverse = self._words[translation]
        if word in reverse:
            logger.debug("Conflict: reverse edge %s -> %s exists", translation, word)
            return False
        reverse.add(self._canonical(word))
        undo.append(lambda: reverse.discard(word))

        return True

    def remove_translation(self, word: Word, translation: Word) -> bool:
        """Unlink two words. Both words stay in the dictionary."""
        if word not in self._words or translation not in self._words[word]:
            logger.debug("NotFound: no translation %s -> %s", word, translation)
            return False
        self._words[word].discard(translation)
        self._words[translation].discard(word)
        return True

    def translations_of(self, word: Word) -> Optional[set[Word]]:
        """Get all translations of a word, in any language.

        Returns:
            A new set, or None if the word is not in the dictionary.
        """
        translations = self._words.get(word)
        if translations is None:
            return None
        return set(translations)

    def build_table(
        self,
        source: LanguageRef,
        target: LanguageRef,
    ) -> Optional[DictionaryTable]:
        """Build a translation table from source to target language.

        Source words with no translation into target are left out.

        Returns:
            DictionaryTable, or None if either language is not registered.
        """
        source_lang = self._language(source)
        target_lang = self._language(target)
        if source_lang is None or target_lang is None:
            logger.debug("UnregisteredLanguage: table %s -> %s", source, target)
            return None

        entries: dict[Word, set[Word]] = {}
        for word, translations in self._words.items():
            if word.code != source_lang.code:
                continue
            matches = {t for t in translations if t.code == target_lang.code}
            if matches:
                entries[word] = matches

        return DictionaryTable(entries, source_lang, target_lang)

    # -------------------------------------------------------------------------
    # Integrity
    # -------------------------------------------------------------------------

    def check_integrity(self) -> None:
        """Verify the graph invariants.

        Raises:
            IntegrityError: On the first violation found.
        """
        for word, translations in self._words.items():
            if not self._langs.contains(word.language):
                raise IntegrityError(f"{word} has an unregistered language")
            for translation in translations:
                if translation not in self._words:
                    raise IntegrityError(f"{word} -> {translation} is dangling")
                if word not in self._words[translation]:
                    raise IntegrityError(f"{word} -> {translation} is not mirrored")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _language(self, language: Optional[LanguageRef]) -> Optional[Language]:
        """Resolve a Language or code to the registered Language."""
        if isinstance(language, Language):
            language = language.code
        return self._langs.get(language)

    def _canonical(self, word: Word) -> Word:
        """Bind a word to the registered copy of its language."""
        language = self._langs.get(word.code)
        if language is None or language.title == word.language.title:
            return word
        return word.with_language(language)

    def _coerce(
        self,
        word: Optional[WordRef],
        language: Optional[LanguageRef],
    ) -> Optional[Word]:
        """Turn (text, language) arguments into a Word."""
        if isinstance(word, Word):
            return word
        if not isinstance(word, str) or not word or language is None:
            logger.debug("InvalidArgument: word=%r language=%r", word, language)
            return None
        if isinstance(language, str):
            found = self._langs.get(language)
            if found is None:
                logger.debug("UnregisteredLanguage: %r", language)
                return None
            language = found
        return Word(word, language)

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, {self._langs!r})"
