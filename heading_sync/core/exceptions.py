"""
Exceptions for heading sync operations.
File: heading_sync/core/exceptions.py
"""


class HeadingSyncError(Exception):
    """Base class for heading sync errors."""


class FileConflictError(FileExistsError, HeadingSyncError):
    """
    Raised when a rename target already exists in the vault.
    
    Inherits from FileExistsError as it represents a more specific
    type of "file already exists" condition, carrying the note that
    was about to be renamed.
    """
    
    def __init__(self, filepath, source=None, message=None):
        """
        Initialize file conflict error.
        
        Args:
            filepath: Vault path of the existing file
            source: Vault path of the note being renamed
            message: Custom error message
        """
        self.filepath = filepath
        self.source = source
        
        if message:
            super().__init__(message)
        else:
            base_msg = f"File already exists: {filepath}"
            if source:
                base_msg += f" (renaming {source})"
            super().__init__(base_msg)


class SettingsError(HeadingSyncError):
    """Raised when the settings file cannot be read or written."""
    
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Settings file {path}: {reason}")


# End of file #
