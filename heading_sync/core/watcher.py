"""
Polling event source for a vault on disk.
File: heading_sync/core/watcher.py

A note whose modification time changes is treated as saved. The saved
note becomes the active one first, since a save comes from the note
being edited.
"""

import time
import threading
from typing import Optional

from rich.console import Console

from heading_sync.core.results import SyncOutcome
from heading_sync.core.vault import Document, FileSystemVault, Workspace

console = Console()


class PollingWatcher:
    """Deliver save events to an orchestrator by polling file mtimes."""
    
    def __init__(self, vault: FileSystemVault, orchestrator, workspace: Workspace,
                 interval: float = 1.0, on_result=None):
        self.vault = vault
        self.orchestrator = orchestrator
        self.workspace = workspace
        self.interval = interval
        self.on_result = on_result
        self._mtimes = {}
    
    def _scan(self) -> dict[str, float]:
        mtimes = {}
        for document in self.vault.list_files():
            try:
                mtimes[document.path] = self.vault.absolute_path(document).stat().st_mtime
            except OSError:
                # Removed between listing and stat
                continue
        return mtimes
    
    def prime(self):
        """Record current modification times without firing events."""
        self._mtimes = self._scan()
    
    def poll(self) -> list:
        """
        Check once for saved notes and deliver their events.
        
        New notes are recorded but not treated as saves.
        
        Returns:
            Sync results for the notes that changed
        """
        current = self._scan()
        results = []
        renamed = []
        
        for path, mtime in current.items():
            previous = self._mtimes.get(path)
            if previous is None or previous == mtime:
                continue
            
            document = Document(path)
            self.workspace.set_active_file(document)
            result = self.orchestrator.handle_save(document)
            results.append(result)
            
            if self.on_result is not None:
                self.on_result(result)
            
            if result.outcome == SyncOutcome.RENAMED:
                renamed.append(path)
        
        for path in renamed:
            current.pop(path, None)
        
        self._mtimes = current
        return results
    
    def run(self, max_polls: Optional[int] = None, stop_event: Optional[threading.Event] = None):
        """Poll until stopped, interrupted, or max_polls is reached."""
        self.prime()
        console.print(f"[cyan]Watching {self.vault.root} (every {self.interval}s, Ctrl+C to stop)[/cyan]")
        
        polls = 0
        while max_polls is None or polls < max_polls:
            if stop_event is not None and stop_event.wait(self.interval):
                break
            if stop_event is None:
                time.sleep(self.interval)
            self.poll()
            polls += 1


# End of file #
