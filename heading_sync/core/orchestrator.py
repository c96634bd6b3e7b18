"""
Sync Orchestrator - heading to filename renaming
File: heading_sync/core/orchestrator.py

Flow for every trigger:
    read note -> locate heading -> sanitize -> decide -> rename

Automatic triggers (save/open) are gated by their hook setting, by the
note being the active Markdown note, and by the ignore rules. The manual
sync command skips all of that gating.

Overlapping triggers for the same note are single-flighted: while a sync
of a path is in flight, further triggers for that path are dropped.
"""

import threading
from typing import Callable, Optional, Iterable
from contextlib import contextmanager

from heading_sync.ui import show_notice
from heading_sync.core.vault import Document, Workspace
from heading_sync.core.locator import locate_heading
from heading_sync.core.results import SyncOutcome, SyncResult
from heading_sync.core.settings import Settings, SettingsContext
from heading_sync.core.exclusions import FolderExclusions
from heading_sync.core.ignore_filter import is_ignored
from heading_sync.renamer.sanitizer import sanitize_heading


class SyncOrchestrator:
    """Keeps note filenames in sync with their first heading."""
    
    def __init__(self,
                 vault,
                 workspace: Workspace,
                 settings: SettingsContext,
                 exclusion_check: Optional[Callable[[Document], bool]] = None,
                 notify: Callable[[str], None] = show_notice):
        """
        Args:
            vault: Document store with read(document) and rename(document, new_path)
            workspace: Tracks the active note
            settings: Source of settings snapshots
            exclusion_check: External exclusion predicate; defaults to the
                folder exclusions named in the settings
            notify: User-visible notice sink
        """
        self.vault = vault
        self.workspace = workspace
        self.settings = settings
        self.exclusion_check = exclusion_check
        self.notify = notify
        
        # Observable only; overlapping syncs are handled by the in-flight registry
        self.is_rename_in_progress = False
        
        self._in_flight = set()
        self._in_flight_lock = threading.Lock()
    
    # =============================================================================
    # TRIGGERS
    # =============================================================================
    
    def handle_save(self, document: Optional[Document]) -> SyncResult:
        """Entry point for 'note saved' events."""
        settings = self.settings.get()
        return self._handle_trigger(document, settings.use_file_save_hook, settings)
    
    def handle_open(self, document: Optional[Document]) -> SyncResult:
        """Entry point for 'note opened' events."""
        settings = self.settings.get()
        return self._handle_trigger(document, settings.use_file_open_hook, settings)
    
    def sync_active(self, dry_run: bool = False) -> SyncResult:
        """Manual 'sync heading to filename' command on the active note."""
        document = self.workspace.get_active_file()
        if document is None or not document.is_markdown:
            return SyncResult(SyncOutcome.SKIPPED, document)
        return self.force_sync(document, dry_run=dry_run)
    
    def ignore_current_file(self) -> bool:
        """
        Add the active note to the manual ignore list.
        
        Returns:
            False if there is no active note
        """
        document = self.workspace.get_active_file()
        if document is None:
            return False
        self.settings.ignore_file(document.path)
        return True
    
    def sync_folder(self, documents: Iterable[Document], dry_run: bool = False) -> list[SyncResult]:
        """
        Sync many notes at once, honoring the ignore rules.
        
        Unlike the event hooks this does not require each note to be active.
        """
        settings = self.settings.get()
        results = []
        for document in documents:
            if not document.is_markdown:
                continue
            if self._is_ignored(document, settings):
                results.append(SyncResult(SyncOutcome.IGNORED, document))
                continue
            results.append(self.force_sync(document, dry_run=dry_run, settings=settings))
        return results
    
    # =============================================================================
    # SYNC PIPELINE
    # =============================================================================
    
    def force_sync(self, document: Document, dry_run: bool = False,
                   settings: Optional[Settings] = None) -> SyncResult:
        """
        Rename a note after its first heading, without any trigger gating.
        
        Failures are reported through the notice sink and returned as a
        FAILED result; nothing is raised to the caller.
        """
        if settings is None:
            settings = self.settings.get()
        
        with self._single_flight(document) as acquired:
            if not acquired:
                return SyncResult(SyncOutcome.BUSY, document)
            return self._sync(document, settings, dry_run)
    
    def _sync(self, document: Document, settings: Settings, dry_run: bool) -> SyncResult:
        try:
            content = self.vault.read(document)
        except Exception as e:
            self.notify(f"💥 {e}")
            return SyncResult(SyncOutcome.FAILED, document, error=str(e))
        
        heading = locate_heading(content)
        if heading is None:
            return SyncResult(SyncOutcome.NO_HEADING, document)
        
        sanitized = sanitize_heading(heading.text, settings.policy)
        if not sanitized:
            return SyncResult(SyncOutcome.EMPTY_NAME, document, heading=heading.text, sanitized=sanitized)
        if sanitized == document.basename:
            return SyncResult(SyncOutcome.UNCHANGED, document, heading=heading.text, sanitized=sanitized)
        
        new_path = document.sibling_path(sanitized)
        
        if dry_run:
            return SyncResult(SyncOutcome.WOULD_RENAME, document, new_path=new_path,
                              heading=heading.text, sanitized=sanitized)
        
        try:
            self.is_rename_in_progress = True
            renamed = self.vault.rename(document, new_path)
        except Exception as e:
            self.notify(f"💥 {e}")
            return SyncResult(SyncOutcome.FAILED, document, new_path=new_path,
                              heading=heading.text, sanitized=sanitized, error=str(e))
        finally:
            self.is_rename_in_progress = False
        
        if self.workspace.is_active(document):
            self.workspace.set_active_file(renamed)
        
        return SyncResult(SyncOutcome.RENAMED, document, new_path=renamed.path,
                          heading=heading.text, sanitized=sanitized)
    
    # =============================================================================
    # GATING
    # =============================================================================
    
    def _handle_trigger(self, document: Optional[Document], hook_enabled: bool,
                        settings: Settings) -> SyncResult:
        if not hook_enabled:
            return SyncResult(SyncOutcome.SKIPPED, document)
        
        if document is None or not document.is_markdown:
            return SyncResult(SyncOutcome.SKIPPED, document)
        
        # Events for anything but the active note are dropped
        if not self.workspace.is_active(document):
            return SyncResult(SyncOutcome.SKIPPED, document)
        
        if self._is_ignored(document, settings):
            return SyncResult(SyncOutcome.IGNORED, document)
        
        return self.force_sync(document, settings=settings)
    
    def _is_ignored(self, document: Document, settings: Settings) -> bool:
        exclusion_check = self.exclusion_check
        if exclusion_check is None:
            exclusion_check = FolderExclusions(settings.excluded_folders)
        return is_ignored(document.path, document, settings.ignore_rules, exclusion_check)
    
    @contextmanager
    def _single_flight(self, document: Document):
        with self._in_flight_lock:
            acquired = document.path not in self._in_flight
            if acquired:
                self._in_flight.add(document.path)
        try:
            yield acquired
        finally:
            if acquired:
                with self._in_flight_lock:
                    self._in_flight.discard(document.path)
    
    def is_in_flight(self, document: Document) -> bool:
        with self._in_flight_lock:
            return document.path in self._in_flight


# End of file #
