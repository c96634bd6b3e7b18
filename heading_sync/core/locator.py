"""
Heading location within note text.
File: heading_sync/core/locator.py

Finds where the note body starts (past any leading metadata block)
and the first level 1 heading in it.
"""

from typing import Optional
from dataclasses import dataclass

from heading_sync.constants import METADATA_DELIMITER, HEADING_MARKER


@dataclass(frozen=True)
class LinePointer:
    line_number: int    # zero-based index of the heading line
    text: str           # line content after the heading marker, untrimmed


def split_lines(content: str) -> list[str]:
    """Split note content into lines the same way for every caller."""
    return content.split('\n')


def find_note_start(lines: list[str]) -> int:
    """
    Find the start of the note body, excluding a metadata block.
    
    A metadata block opens with a first line of exactly '---' and closes
    at the next line of exactly '---'. Without a closing line the block
    is not metadata at all and the body starts at line 0.
    
    Args:
        lines: Note contents, line by line
        
    Returns:
        Zero-based index of the first body line
    """
    if lines and lines[0] == METADATA_DELIMITER:
        for i in range(1, len(lines)):
            if lines[i] == METADATA_DELIMITER:
                return i + 1
    return 0


def find_heading(lines: list[str], start_line: int) -> Optional[LinePointer]:
    """
    Find the first level 1 heading at or after start_line.
    
    Only the exact '# ' marker counts; '##' and '#tag' lines are skipped.
    
    Args:
        lines: Note contents, line by line
        start_line: Zero-based index to begin scanning from
        
    Returns:
        LinePointer to the heading, or None if there is none
    """
    for i in range(start_line, len(lines)):
        if lines[i].startswith(HEADING_MARKER):
            return LinePointer(line_number=i, text=lines[i][len(HEADING_MARKER):])
    return None


def locate_heading(content: str) -> Optional[LinePointer]:
    """Find the first heading of a note's full text."""
    lines = split_lines(content)
    return find_heading(lines, find_note_start(lines))


# End of file #
