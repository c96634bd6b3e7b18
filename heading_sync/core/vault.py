"""
File system access to a vault of Markdown notes.
File: heading_sync/core/vault.py

Notes are addressed by vault-relative POSIX paths ("notes/todo.md"), so
ignore rules and settings stay portable between machines.
"""

from typing import Optional
from pathlib import Path, PurePosixPath
from dataclasses import dataclass

from heading_sync.constants import MARKDOWN_EXTENSION
from heading_sync.core.exceptions import FileConflictError


@dataclass(frozen=True)
class Document:
    """A note in the vault, identified by its vault-relative path."""
    path: str
    
    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name
    
    @property
    def basename(self) -> str:
        """File name without extension."""
        return PurePosixPath(self.path).stem
    
    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix.lstrip('.')
    
    @property
    def parent(self) -> str:
        """Vault-relative parent folder, '' for the vault root."""
        parent = PurePosixPath(self.path).parent.as_posix()
        return '' if parent == '.' else parent
    
    @property
    def is_markdown(self) -> bool:
        return self.extension == MARKDOWN_EXTENSION
    
    def sibling_path(self, basename: str) -> str:
        """Path of a Markdown note named basename in the same folder."""
        filename = f"{basename}.{MARKDOWN_EXTENSION}"
        return f"{self.parent}/{filename}" if self.parent else filename
    
    def __str__(self):
        return self.path


class Workspace:
    """Tracks which note is currently active (being viewed or edited)."""
    
    def __init__(self, active_document: Optional[Document] = None):
        self.active_document = active_document
    
    def get_active_file(self) -> Optional[Document]:
        return self.active_document
    
    def set_active_file(self, document: Optional[Document]):
        self.active_document = document
    
    def is_active(self, document: Document) -> bool:
        return self.active_document is not None and self.active_document == document


class FileSystemVault:
    """Document store backed by a folder on disk."""
    
    def __init__(self, root: Path):
        self.root = Path(root)
    
    def document_for(self, file_path: Path) -> Document:
        """
        Build a Document for a file inside the vault.
        
        Raises:
            ValueError: If file_path is outside the vault root
        """
        file_path = Path(file_path)
        if not file_path.is_absolute():
            file_path = Path.cwd() / file_path
        relative = file_path.resolve().relative_to(self.root.resolve())
        return Document(relative.as_posix())
    
    def absolute_path(self, document: Document) -> Path:
        return self.root / Path(*PurePosixPath(document.path).parts)
    
    def read(self, document: Document) -> str:
        """Read a note's full text."""
        return self.absolute_path(document).read_text(encoding='utf-8')
    
    def rename(self, document: Document, new_path: str) -> Document:
        """
        Rename a note within the vault.
        
        Args:
            document: Note to rename
            new_path: Vault-relative target path
            
        Returns:
            The document at its new path
            
        Raises:
            FileConflictError: If a different file already exists at new_path
            OSError: If the file system refuses the rename
        """
        source = self.absolute_path(document)
        target = self.absolute_path(Document(new_path))
        
        # Case-only renames on case-insensitive file systems point at the same file
        if target.exists() and not _same_file(source, target):
            raise FileConflictError(new_path, source=document.path)
        
        source.rename(target)
        return Document(new_path)
    
    def list_files(self) -> list[Document]:
        """List every Markdown note in the vault, sorted by path."""
        documents = []
        for file_path in self.root.rglob(f"*.{MARKDOWN_EXTENSION}"):
            relative = file_path.relative_to(self.root)
            # Skip hidden files and folders, including the settings file
            if any(part.startswith('.') for part in relative.parts):
                continue
            if file_path.is_file():
                documents.append(Document(relative.as_posix()))
        return sorted(documents, key=lambda d: d.path)


def _same_file(first: Path, second: Path) -> bool:
    try:
        return first.samefile(second)
    except OSError:
        return False


# End of file #
