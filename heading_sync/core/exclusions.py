"""
Folder-scoped exclusion rules.
File: heading_sync/core/exclusions.py

Independent rule source consulted by the ignore filter: any note inside
an excluded folder (at any depth) is left alone.
"""

from heading_sync.core.vault import Document


class FolderExclusions:
    """Exclude notes that live under any of the configured folders."""
    
    def __init__(self, folders=None):
        normalized = (_normalize_folder(f) for f in (folders or []))
        self.folders = tuple(f for f in normalized if f)
    
    def is_excluded(self, document: Document) -> bool:
        for folder in self.folders:
            if document.path.startswith(folder + '/'):
                return True
        return False
    
    def __call__(self, document: Document) -> bool:
        return self.is_excluded(document)
    
    def __repr__(self):
        return f"FolderExclusions({list(self.folders)})"


def _normalize_folder(folder: str) -> str:
    return str(folder).replace('\\', '/').strip().strip('/')


# End of file #
