"""
Heading to filename conversion for Heading Sync.
File: heading_sync/renamer/__init__.py

Turns raw heading text into a name that is safe to use as a note
filename, following the user's sanitization policy.
"""

from heading_sync.renamer.sanitizer import (
    SanitizationPolicy,
    sanitize_heading,
    regexp_escape,
    parse_user_illegal_symbols,
)


__all__ = [
    'SanitizationPolicy',
    'sanitize_heading',
    'regexp_escape',
    'parse_user_illegal_symbols',
]

# End of file #
