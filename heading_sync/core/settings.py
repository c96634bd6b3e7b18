"""
Settings - Immutable Snapshots With a Single Source of Truth
File: heading_sync/core/settings.py

ARCHITECTURE:
- Settings is a frozen snapshot; every update builds a new one
- SettingsContext holds the current snapshot and swaps it atomically
- SettingsStore persists snapshots as JSON with camelCase keys
- Sync code reads one snapshot per trigger and passes it down explicitly
"""

import re
import json
import threading
from pathlib import Path
from dataclasses import dataclass, replace
from typing import Optional

from heading_sync.core.exceptions import SettingsError
from heading_sync.core.ignore_filter import IgnoreRules
from heading_sync.renamer.sanitizer import SanitizationPolicy, parse_user_illegal_symbols


@dataclass(frozen=True)
class Settings:
    """Immutable settings snapshot."""
    allow_alphanumeric_only: bool = False
    user_illegal_symbols: tuple[str, ...] = ()
    user_illegal_symbol_replacement: str = ''
    ignored_files: tuple[str, ...] = ()
    ignore_regex: str = ''
    use_file_save_hook: bool = True
    use_file_open_hook: bool = True
    excluded_folders: tuple[str, ...] = ()
    
    @property
    def policy(self) -> SanitizationPolicy:
        return SanitizationPolicy(
            user_illegal_symbols=self.user_illegal_symbols,
            replacement=self.user_illegal_symbol_replacement,
            alphanumeric_only=self.allow_alphanumeric_only,
        )
    
    @property
    def ignore_rules(self) -> IgnoreRules:
        return IgnoreRules(
            ignored_files=frozenset(self.ignored_files),
            ignore_regex=self.ignore_regex,
        )
    
    def __str__(self):
        return (f"Settings(replacement={self.user_illegal_symbol_replacement!r}, "
                f"{len(self.user_illegal_symbols)} custom symbols, "
                f"{len(self.ignored_files)} ignored files)")


# Persisted key -> Settings field
_FIELD_KEYS = {
    'allowAlphanumericOnly': 'allow_alphanumeric_only',
    'userIllegalSymbols': 'user_illegal_symbols',
    'userIllegalSymbolReplacement': 'user_illegal_symbol_replacement',
    'ignoredFiles': 'ignored_files',
    'ignoreRegex': 'ignore_regex',
    'useFileSaveHook': 'use_file_save_hook',
    'useFileOpenHook': 'use_file_open_hook',
    'excludedFolders': 'excluded_folders',
}


def is_valid_regex(pattern: str) -> bool:
    try:
        re.compile(pattern)
        return True
    except re.error:
        return False


def settings_to_dict(settings: Settings) -> dict:
    """Convert a snapshot to the persisted JSON layout."""
    return {
        'allowAlphanumericOnly': settings.allow_alphanumeric_only,
        'userIllegalSymbols': list(settings.user_illegal_symbols),
        'userIllegalSymbolReplacement': settings.user_illegal_symbol_replacement,
        # Stored as a path -> null mapping, membership only
        'ignoredFiles': {path: None for path in settings.ignored_files},
        'ignoreRegex': settings.ignore_regex,
        'useFileSaveHook': settings.use_file_save_hook,
        'useFileOpenHook': settings.use_file_open_hook,
        'excludedFolders': list(settings.excluded_folders),
    }


def _as_string_tuple(value, split) -> Optional[tuple]:
    """Read a stored list field; a string is split the way its text field is."""
    if isinstance(value, str):
        return split(value)
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    return None


def settings_from_dict(data: dict) -> Settings:
    """
    Build a snapshot from persisted data.
    
    Missing keys take their defaults and unknown keys are dropped.
    A stored ignore regex that does not compile is loaded as disabled.
    """
    if not isinstance(data, dict):
        raise ValueError("settings data must be a JSON object")
    
    values = {}
    for key, field_name in _FIELD_KEYS.items():
        if key not in data or data[key] is None:
            continue
        value = data[key]
        
        if field_name == 'user_illegal_symbols':
            value = _as_string_tuple(value, split=parse_user_illegal_symbols)
        elif field_name == 'excluded_folders':
            value = _as_string_tuple(value, split=lambda text: tuple(text.split(',')))
        elif field_name == 'ignored_files':
            # Accept the mapping layout, a plain list, and a single path
            if isinstance(value, dict):
                value = tuple(value.keys())
            else:
                value = _as_string_tuple(value, split=lambda text: (text,))
        elif field_name in ('user_illegal_symbol_replacement', 'ignore_regex'):
            value = str(value)
        elif not isinstance(value, bool):
            # Hand-edited "false" and friends fall back to the default
            value = None
        
        if value is not None:
            values[field_name] = value
    
    settings = Settings(**values)
    if not is_valid_regex(settings.ignore_regex):
        settings = replace(settings, ignore_regex='')
    return settings


class SettingsStore:
    """Load and save settings as a JSON file."""
    
    def __init__(self, path: Path):
        self.path = Path(path)
    
    def load(self) -> Settings:
        """
        Load settings, falling back to defaults when no file exists.
        
        Raises:
            SettingsError: If the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            return Settings()
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
            return settings_from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise SettingsError(self.path, e) from e
    
    def save(self, settings: Settings):
        """
        Write settings to disk.
        
        Raises:
            SettingsError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(settings_to_dict(settings), indent=2) + '\n',
                                 encoding='utf-8')
        except OSError as e:
            raise SettingsError(self.path, e) from e


class SettingsContext:
    """
    Current settings for a running sync session.
    
    Readers call get() once per operation and work from that snapshot.
    Every setter builds a new snapshot, swaps it in under a lock and
    persists it through the store (when one is attached).
    """
    
    def __init__(self, store: Optional[SettingsStore] = None, settings: Optional[Settings] = None):
        self.store = store
        self._lock = threading.Lock()
        if settings is None:
            settings = store.load() if store is not None else Settings()
        self._settings = settings
    
    # =============================================================================
    # SNAPSHOT ACCESS
    # =============================================================================
    
    def get(self) -> Settings:
        return self._settings
    
    def update(self, **changes) -> Settings:
        """Swap in a snapshot with the given fields changed, then save it."""
        with self._lock:
            self._settings = replace(self._settings, **changes)
            settings = self._settings
        self.save()
        return settings
    
    def save(self):
        if self.store is not None:
            self.store.save(self._settings)
    
    def reset(self):
        """Reset to defaults (mainly for testing)."""
        with self._lock:
            self._settings = Settings()
    
    # =============================================================================
    # SANITIZATION SETTINGS
    # =============================================================================
    
    def set_alphanumeric_only(self, value: bool) -> Settings:
        return self.update(allow_alphanumeric_only=bool(value))
    
    def set_user_illegal_symbols(self, value: str) -> Settings:
        """Set custom symbols from the comma-separated text field."""
        return self.update(user_illegal_symbols=parse_user_illegal_symbols(value))
    
    def set_replacement(self, value: str) -> Settings:
        return self.update(user_illegal_symbol_replacement=str(value))
    
    # =============================================================================
    # HOOK SETTINGS
    # =============================================================================
    
    def set_use_file_save_hook(self, value: bool) -> Settings:
        return self.update(use_file_save_hook=bool(value))
    
    def set_use_file_open_hook(self, value: bool) -> Settings:
        return self.update(use_file_open_hook=bool(value))
    
    # =============================================================================
    # IGNORE SETTINGS
    # =============================================================================
    
    def set_ignore_regex(self, pattern: str) -> bool:
        """
        Set the ignore regex, validating it first.
        
        An invalid pattern is not stored; the rule reverts to disabled.
        
        Returns:
            True if the pattern was accepted
        """
        if is_valid_regex(pattern):
            self.update(ignore_regex=pattern)
            return True
        self.update(ignore_regex='')
        return False
    
    def ignore_file(self, path: str) -> Settings:
        current = self.get().ignored_files
        if path in current:
            return self.get()
        return self.update(ignored_files=current + (path,))
    
    def unignore_file(self, path: str) -> bool:
        """Remove a path from the manual ignore list. Returns False if absent."""
        current = self.get().ignored_files
        if path not in current:
            return False
        self.update(ignored_files=tuple(p for p in current if p != path))
        return True
    
    def set_excluded_folders(self, folders) -> Settings:
        return self.update(excluded_folders=tuple(str(f) for f in folders))


# End of file #
