"""
Decide whether a note is left out of automatic syncing.
File: heading_sync/core/ignore_filter.py

Three independent mechanisms, any of which ignores a note:
- an external exclusion predicate (folder rules)
- the manually curated list of ignored paths
- a single ignore regex searched anywhere in the path

A broken regex never raises from here; it simply matches nothing.
"""

import re
from typing import Callable, Optional, Iterable
from dataclasses import dataclass, field

from heading_sync.core.vault import Document


@dataclass(frozen=True)
class IgnoreRules:
    """Snapshot of the path-based ignore settings."""
    ignored_files: frozenset = field(default_factory=frozenset)
    ignore_regex: str = ''


def regex_matches_path(pattern: str, path: str) -> bool:
    """
    Search path for pattern, failing open.
    
    Returns False for an empty pattern and for any pattern that fails
    to compile or evaluate.
    """
    if not pattern:
        return False
    try:
        return re.search(pattern, path) is not None
    except (re.error, RecursionError, TypeError):
        return False


def is_ignored(path: str,
               document: Document,
               rules: IgnoreRules,
               external_exclusion_check: Optional[Callable[[Document], bool]] = None) -> bool:
    """
    Check whether a note should be skipped by automatic syncing.
    
    Args:
        path: Vault-relative path tested against the path rules
        document: Note handed to the exclusion predicate
        rules: Current ignore rules
        external_exclusion_check: Optional predicate from another rule source
        
    Returns:
        True if any mechanism matches
    """
    if external_exclusion_check is not None and external_exclusion_check(document):
        return True
    
    if path in rules.ignored_files:
        return True
    
    return regex_matches_path(rules.ignore_regex, path)


def list_regex_ignored(paths: Iterable[str], pattern: str) -> list[str]:
    """List the paths currently matched by an ignore regex."""
    if not pattern:
        return []
    try:
        compiled = re.compile(pattern)
    except re.error:
        return []
    return [path for path in paths if compiled.search(path) is not None]


# End of file #
