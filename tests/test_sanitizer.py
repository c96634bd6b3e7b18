"""
Test module for heading sanitization.
File: tests/test_sanitizer.py

Tests each sanitization step and the order they run in.
"""

import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from heading_sync.renamer.sanitizer import (
    SanitizationPolicy,
    sanitize_heading,
    regexp_escape,
    parse_user_illegal_symbols,
)


DASH = SanitizationPolicy(replacement='-')
REMOVE = SanitizationPolicy(replacement='')


def test_stock_characters_replaced():
    """Colon and pipe each become a single replacement."""
    assert sanitize_heading("Hello: World | Foo", DASH) == "Hello- World - Foo"


def test_consecutive_replacements_collapse():
    assert sanitize_heading("A/B//C", DASH) == "A-B-C"


def test_empty_replacement_removes():
    assert sanitize_heading("Note: Draft", REMOVE) == "Note Draft"


def test_every_stock_character():
    assert sanitize_heading("a\\b/c:d|e#f^g[h]i", REMOVE) == "abcdefghi"
    assert sanitize_heading("[[Link]] ^block", REMOVE) == "Link block"


def test_whitespace_trimmed_first():
    assert sanitize_heading("   Padded Title \t", REMOVE) == "Padded Title"


def test_trailing_replacement_stripped():
    assert sanitize_heading("Title:", DASH) == "Title"
    assert sanitize_heading("Title//", DASH) == "Title"


def test_leading_replacement_kept():
    """Only a trailing occurrence is stripped."""
    assert sanitize_heading(":Title", DASH) == "-Title"


def test_alphanumeric_only_transliterates_accents():
    policy = SanitizationPolicy(replacement='-', alphanumeric_only=True)
    assert sanitize_heading("Café René", policy) == "Cafe-Rene"


def test_alphanumeric_only_accent_table():
    policy = SanitizationPolicy(replacement='', alphanumeric_only=True)
    assert sanitize_heading("áéíóúüñ ÁÉÍÓÚÜÑ", policy) == "aeiouunAEIOUUN"
    assert sanitize_heading("Año 2024", policy) == "Ano2024"


def test_alphanumeric_only_keeps_replacement():
    policy = SanitizationPolicy(replacement='_', alphanumeric_only=True)
    assert sanitize_heading("Hello, World!", policy) == "Hello_World"
    assert sanitize_heading("snake_case name", policy) == "snake_case_name"


def test_alphanumeric_only_drops_other_letters():
    """Letters outside the fixed accent table are not transliterated."""
    policy = SanitizationPolicy(replacement='-', alphanumeric_only=True)
    assert sanitize_heading("Straße", policy) == "Stra-e"


def test_user_symbols_replaced():
    policy = SanitizationPolicy(user_illegal_symbols=('?', '!'), replacement='-')
    assert sanitize_heading("What? Now!", policy) == "What- Now"


def test_user_symbols_are_literal():
    """Regex metacharacters in user symbols match literally."""
    policy = SanitizationPolicy(user_illegal_symbols=('.',), replacement='')
    assert sanitize_heading("v1.2.3", policy) == "v123"
    
    policy = SanitizationPolicy(user_illegal_symbols=('(tmp)', '*'), replacement='')
    assert sanitize_heading("note (tmp) x*y", policy) == "note  xy"


def test_user_symbols_strings():
    policy = SanitizationPolicy(user_illegal_symbols=('tmp', '..'), replacement='-')
    assert sanitize_heading("tmp notes...", policy) == "- notes-."


def test_empty_user_symbols_discarded():
    """An empty entry must not match everywhere."""
    policy = SanitizationPolicy(user_illegal_symbols=('', 'x'), replacement='-')
    assert sanitize_heading("axb", policy) == "a-b"
    
    policy = SanitizationPolicy(user_illegal_symbols=('',), replacement='-')
    assert sanitize_heading("abc", policy) == "abc"


def test_multi_character_replacement_collapses():
    policy = SanitizationPolicy(replacement='__')
    assert sanitize_heading("a/b", policy) == "a__b"
    assert sanitize_heading("a//b", policy) == "a__b"
    assert sanitize_heading("a:", policy) == "a"


def test_replacement_with_backslash_stays_literal():
    policy = SanitizationPolicy(user_illegal_symbols=(' ',), replacement='\\1')
    assert sanitize_heading("a b", policy) == "a\\1b"


def test_heading_of_only_illegal_characters_is_empty():
    assert sanitize_heading("###", REMOVE) == ""
    assert sanitize_heading("/", DASH) == ""
    assert sanitize_heading("   ", DASH) == ""


def test_idempotent_once_stable():
    policies = [
        DASH,
        REMOVE,
        SanitizationPolicy(replacement='-', alphanumeric_only=True),
        SanitizationPolicy(user_illegal_symbols=('?', 'tmp'), replacement='_'),
    ]
    inputs = ["Hello: World | Foo", "A/B//C", "Café René?", "tmp/notes: draft?", "Plain"]
    
    for policy in policies:
        for text in inputs:
            once = sanitize_heading(text, policy)
            twice = sanitize_heading(once, policy)
            assert sanitize_heading(twice, policy) == twice, (text, policy)


def test_regexp_escape():
    assert regexp_escape("a.b*c") == "a\\.b\\*c"
    assert regexp_escape("(x)[y]{z}") == "\\(x\\)\\[y\\]\\{z\\}"
    assert regexp_escape("^$|+?\\") == "\\^\\$\\|\\+\\?\\\\"
    assert regexp_escape("plain-text") == "plain-text"


def test_parse_user_illegal_symbols():
    assert parse_user_illegal_symbols("?,!,,tmp") == ("?", "!", "", "tmp")
    assert parse_user_illegal_symbols("") == ("",)


def main():
    """Run all tests and report results."""
    tests = [(name, func) for name, func in globals().items()
             if name.startswith('test_') and callable(func)]
    
    passed = 0
    for name, func in tests:
        try:
            func()
            print(f"✓ {name}")
            passed += 1
        except AssertionError as e:
            print(f"✗ {name}: {e}")
    
    print(f"\nPassed: {passed}/{len(tests)}")
    return 0 if passed == len(tests) else 1


if __name__ == "__main__":
    exit(main())


# End of file #
