"""lexigraph - Multilingual translation dictionary.

Words tagged with a language, linked pairwise by symmetric translation
edges, queryable per language or as a two-language translation table.

Core concepts:
    - Language: (code, title), identified by code
    - Word: (text, language), immutable value and graph node
    - Dictionary: languages plus the symmetric translation graph
    - DictionaryTable: source word -> translations snapshot

Usage:
    from lexigraph import Dictionary, Language, Word

    en = Language("en", "English")
    ru = Language("ru", "Russian")

    dictionary = Dictionary(en)
    dictionary.add_language(ru)

    build = Word("build", en)
    dictionary.add_word(build)
    dictionary.add_translation(build, "строить", ru)

    table = dictionary.build_table(ru, en)
    for word in table:
        print(word.text, table.translations(word))

    dictionary.remove_language(ru)   # drops every Russian word and edge
"""

from .schema import Language, Word, PLACEHOLDER_TEXT
from .languages import LanguageSet, SortKey
from .table import DictionaryTable
from .dictionary import Dictionary
from .exceptions import LexigraphError, ValidationError, IntegrityError

__version__ = "0.1.0"

__all__ = [
    "Language",
    "Word",
    "PLACEHOLDER_TEXT",
    "LanguageSet",
    "SortKey",
    "DictionaryTable",
    "Dictionary",
    "LexigraphError",
    "ValidationError",
    "IntegrityError",
]
