"""lexigraph CLI - walkthrough of the translation dictionary.

Usage:
    python -m lexigraph.main
    python -m lexigraph.main --languages "en:English,ru:Russian,de:German" -v
"""

import argparse
import logging
import sys
from typing import Optional

from .dictionary import Dictionary
from .exceptions import ValidationError
from .schema import Language, Word
from .table import DictionaryTable
from . import config as cfg


def print_language(language: Language) -> None:
    print(f"Language: {language.code}, {language.title}")


def print_table(table: Optional[DictionaryTable]) -> None:
    """Print one line per source word with its translations."""
    if table is None or table.is_empty():
        print("  (empty table)")
        return

    for word in table.words():
        translations = ", ".join(sorted(t.text for t in table.translations(word)))
        print(f"  {word.text} | {translations}")


def print_words(words: Optional[set[Word]]) -> None:
    if not words:
        print("  (no words)")
        return

    for word in sorted(words):
        print(f"  {word.text}")


def register(dictionary: Dictionary, language: Language) -> bool:
    if dictionary.add_language(language):
        print(f"Language added: {language.title}")
        return True
    print(f"Could not add language: {language.title}")
    return False


def run_demo(first: Language, second: Language, third: Language) -> int:
    """Run the walkthrough with three languages.

    The word samples are English, Russian and German; the languages only
    provide codes and titles.
    """
    print_language(first)
    print_language(second)

    # A dictionary always starts with one language
    dictionary = Dictionary(first)
    if not register(dictionary, second):
        return 1
    print()

    # Word plus translation, then the table from second to first
    build = Word("build", first)
    dictionary.add_word(build)
    dictionary.add_translation(build, "строить", second)
    print(f"[{second.code} -> {first.code}]")
    print_table(dictionary.build_table(second, first))
    print()

    # Word without translations, then every word of that language
    dictionary.add_word("словарь", second)
    print(f"Words in {second.title}:")
    print_words(dictionary.words_for_language(second))
    print()

    print_language(third)
    if not register(dictionary, third):
        return 1

    # The translation target does not exist yet and gets created
    dictionary.add_translation(Word("словарь", second), Word("wortschatz", third))
    print(f"[{third.code} -> {second.code}]")
    print_table(dictionary.build_table(third, second))
    print()

    dictionary.add_translation(build, "errichten", third)
    dictionary.add_translation(build, "aufbauen", third)
    print(f"[{first.code} -> {third.code}]")
    print_table(dictionary.build_table(first, third))
    print()

    dictionary.remove_word(build)
    print(f"After removing '{build.text}':")
    print(f"[{first.code} -> {third.code}]")
    print_table(dictionary.build_table(first, third))
    print(f"Words in {first.title}:")
    print_words(dictionary.words_for_language(first))
    print()

    # A language left without words gets one back as a translation target
    dictionary.add_translation(Word("errichten", third), Word("dictionary", first))
    print(f"Words in {first.title}:")
    print_words(dictionary.words_for_language(first))
    print(f"[{third.code} -> {first.code}]")
    print_table(dictionary.build_table(third, first))
    print()

    print(f"Words in {second.title} before removal:")
    print_words(dictionary.words_for_language(second))
    dictionary.remove_language(second)
    print(f"Words in {second.title} after removal:")
    print_words(dictionary.words_for_language(second))
    print()

    added = dictionary.add_word("слово", second)
    print(f"Adding a word in {second.title}: {added}")
    print()

    dictionary.add_language(second)
    dictionary.add_word("слово", second)
    print(f"Words in {second.title}:")
    print_words(dictionary.words_for_language(second))

    dictionary.check_integrity()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)

    parser = argparse.ArgumentParser(
        description="lexigraph - multilingual translation dictionary walkthrough"
    )
    parser.add_argument(
        "--languages",
        "-l",
        type=str,
        default=cfg.default_languages(),
        help=f"Comma-separated code:Title pairs, three needed (default: {cfg.default_languages()})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Log rejected operations",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=defaults.get("quiet", False),
        help="Only log errors",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, cfg.default_log_level().upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        languages = cfg.parse_languages(args.languages)
    except ValidationError as e:
        print(f"ERROR - {e}")
        return 2

    if len(languages) < 3:
        print(f"ERROR - three languages needed, got {len(languages)}")
        return 2

    print("=" * 60)
    print("lexigraph - Multilingual Translation Dictionary")
    print("=" * 60)

    status = run_demo(*languages[:3])

    print("=" * 60)
    print("Done!" if status == 0 else "Stopped.")
    print("=" * 60)

    return status


if __name__ == "__main__":
    sys.exit(main())
