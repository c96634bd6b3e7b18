"""
Test module for console reporting.
File: tests/test_ui.py

Checks that sync reports use the shared console styles and that
user-supplied text is printed literally.
"""

import sys
from pathlib import Path
from unittest.mock import patch

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console

from heading_sync import ui
from heading_sync.constants import CONSOLE_STYLES
from heading_sync.core.vault import Document
from heading_sync.core.results import SyncOutcome, SyncResult


def _capture(func, *args, **kwargs) -> str:
    console = Console(record=True, width=200)
    with patch.object(ui, 'console', console):
        func(*args, **kwargs)
    return console.export_text()


def test_every_outcome_uses_a_console_style():
    outcomes = [value for name, value in vars(SyncOutcome).items() if name.isupper()]
    for outcome in outcomes:
        style, label = ui._OUTCOME_STYLES[outcome]
        assert style in CONSOLE_STYLES.values(), outcome
        assert label


def test_report_renamed_note():
    result = SyncResult(SyncOutcome.RENAMED, Document("a.md"), new_path="Alpha.md")
    assert "Renamed: a.md → Alpha.md" in _capture(ui.report_sync_result, result)


def test_quiet_outcomes_need_verbose():
    result = SyncResult(SyncOutcome.UNCHANGED, Document("Alpha.md"))
    assert _capture(ui.report_sync_result, result) == ""
    assert "Up to date: Alpha.md" in _capture(ui.report_sync_result, result, verbose=True)


def test_notice_keeps_brackets():
    output = _capture(ui.show_notice, "💥 File already exists: [draft].md")
    assert "[draft].md" in output


def test_regex_ignored_listing():
    output = _capture(ui.display_regex_ignored_files, ["a.md", "drafts/b.md"], "drafts/")
    lines = [line.strip() for line in output.splitlines()]
    assert "drafts/b.md" in lines
    assert "a.md" not in lines


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
        except Exception as e:
            print(f"✗ {name}: {e}")
    
    print(f"\nPassed: {passed}/{len(tests)}")
    return 0 if passed == len(tests) else 1


if __name__ == "__main__":
    exit(main())


# End of file #
