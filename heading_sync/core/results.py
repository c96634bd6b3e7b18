"""
Sync result reporting types.
File: heading_sync/core/results.py
"""

from typing import Optional
from dataclasses import dataclass

from heading_sync.core.vault import Document


class SyncOutcome:
    """Enumeration of what a sync attempt ended with."""
    RENAMED         = "renamed"         # Note was renamed to its heading
    WOULD_RENAME    = "would-rename"    # Dry run: note would be renamed
    UNCHANGED       = "unchanged"       # Name already matches the heading
    NO_HEADING      = "no-heading"      # Note has no level 1 heading
    EMPTY_NAME      = "empty-name"      # Heading sanitized to nothing
    IGNORED         = "ignored"         # Matched an ignore rule
    SKIPPED         = "skipped"         # Trigger gated out (hook off, not active, not Markdown)
    BUSY            = "busy"            # Another sync of the same note is in flight
    FAILED          = "failed"          # Reading or renaming raised


@dataclass(frozen=True)
class SyncResult:
    outcome: str
    document: Optional[Document]
    new_path: Optional[str] = None
    heading: Optional[str] = None
    sanitized: Optional[str] = None
    error: Optional[str] = None
    
    def __str__(self):
        target = f" -> {self.new_path}" if self.new_path else ""
        return f"SyncResult({self.outcome}: {self.document}{target})"


# End of file #
