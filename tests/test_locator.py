"""
Test module for heading location.
File: tests/test_locator.py

Covers metadata block skipping and first-heading detection.
"""

import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from heading_sync.core.locator import (
    LinePointer,
    split_lines,
    find_note_start,
    find_heading,
    locate_heading,
)


def test_note_start_after_metadata_block():
    """Body starts right after the closing delimiter."""
    lines = ["---", "title: Example", "tags: [a, b]", "---", "# Heading"]
    assert find_note_start(lines) == 4


def test_note_start_without_closing_delimiter():
    """An unclosed '---' is ordinary content, body starts at 0."""
    lines = ["---", "not really metadata", "# Heading"]
    assert find_note_start(lines) == 0


def test_note_start_without_metadata():
    assert find_note_start(["# Heading", "---", "text", "---"]) == 0
    assert find_note_start(["", "---", "x", "---"]) == 0


def test_note_start_requires_exact_delimiter():
    """Only a line of exactly '---' opens or closes a block."""
    assert find_note_start(["--- ", "a", "---"]) == 0
    assert find_note_start(["---", "a", "----", "---", "b"]) == 4


def test_note_start_empty_input():
    assert find_note_start([]) == 0
    assert find_note_start([""]) == 0


def test_find_heading_first_match_wins():
    lines = ["intro", "# First", "# Second"]
    assert find_heading(lines, 0) == LinePointer(line_number=1, text="First")


def test_find_heading_only_level_one():
    """'##' and '#tag' do not count as a level 1 heading."""
    lines = ["## Sub heading", "#tag", "#", "# Real"]
    assert find_heading(lines, 0) == LinePointer(3, "Real")


def test_find_heading_text_not_trimmed():
    lines = ["#   Spaced out  "]
    assert find_heading(lines, 0).text == "  Spaced out  "


def test_find_heading_respects_start():
    lines = ["# Before", "# After"]
    assert find_heading(lines, 1) == LinePointer(1, "After")
    assert find_heading(lines, 2) is None


def test_find_heading_none():
    assert find_heading(["just text", "## nope"], 0) is None
    assert find_heading([], 0) is None


def test_heading_inside_metadata_is_skipped():
    content = "---\n# not a heading\n---\nbody"
    assert locate_heading(content) is None


def test_unclosed_metadata_scans_from_top():
    content = "---\n# Visible\nmore"
    assert locate_heading(content) == LinePointer(1, "Visible")


def test_locate_heading_after_metadata():
    content = "---\naliases: []\n---\n\n# My Note\n\nText"
    assert locate_heading(content) == LinePointer(4, "My Note")


def test_split_lines_keeps_carriage_returns():
    """Only '\\n' splits lines; a trailing '\\r' stays in the heading text."""
    assert split_lines("# Title\r\nbody") == ["# Title\r", "body"]
    assert locate_heading("# Title\r\nbody").text == "Title\r"


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
