"""
Heading sanitization for filename generation.
File: heading_sync/renamer/sanitizer.py
"""

import re
from typing import Optional
from dataclasses import dataclass, field

from heading_sync.constants import (
    ACCENT_MAP,
    ACCENT_RGX,
    STOCK_ILLEGAL_RGX,
    REGEXP_SPECIAL_RGX,
)


@dataclass(frozen=True)
class SanitizationPolicy:
    """Immutable set of rules deciding what may appear in a note name."""
    user_illegal_symbols: tuple[str, ...] = ()
    replacement: str = ''
    alphanumeric_only: bool = False
    stock_illegal_pattern: re.Pattern = field(default=STOCK_ILLEGAL_RGX, compare=False, repr=False)


def regexp_escape(text: str) -> str:
    """
    Escape regex metacharacters so text matches literally.
    
    Examples:
        "a.b" -> "a\\.b"
        "(tmp)" -> "\\(tmp\\)"
    """
    return REGEXP_SPECIAL_RGX.sub(lambda m: '\\' + m.group(0), str(text))


def parse_user_illegal_symbols(value: str) -> tuple[str, ...]:
    """
    Split the comma-separated custom symbols field.
    
    Empty entries are kept here and dropped when the match pattern is
    built, so the stored field round-trips exactly.
    """
    return tuple(value.split(','))


def _replace_all(pattern: re.Pattern, text: str, replacement: str) -> str:
    # Callable substitute so backslashes in the replacement stay literal
    return pattern.sub(lambda _m: replacement, text)


def _transliterate_accents(text: str) -> str:
    return ACCENT_RGX.sub(lambda m: ACCENT_MAP[m.group(0)], text)


def _build_user_symbols_pattern(symbols) -> Optional[re.Pattern]:
    escaped = [regexp_escape(symbol) for symbol in symbols if symbol]
    if not escaped:
        return None
    return re.compile('|'.join(escaped))


def sanitize_heading(text: str, policy: SanitizationPolicy) -> str:
    """
    Convert heading text to a filesystem-safe note name.
    
    Steps run strictly in order, each assuming the previous ones ran:
    trim, stock illegal characters, alphanumeric-only filter, user
    symbols, then collapsing and trailing cleanup of the replacement.
    
    Examples (replacement "-"):
        "Hello: World | Foo" -> "Hello- World - Foo"
        "A/B//C" -> "A-B-C"
        
    Args:
        text: Raw heading text (as found after the '# ' marker)
        policy: Sanitization rules to apply
        
    Returns:
        Sanitized name; empty string means there is no usable name
    """
    replacement = policy.replacement
    
    text = text.strip()
    
    text = _replace_all(policy.stock_illegal_pattern, text, replacement)
    
    if policy.alphanumeric_only:
        text = _transliterate_accents(text)
        not_alphanumeric = re.compile(f'[^a-zA-Z0-9{re.escape(replacement)}]')
        text = _replace_all(not_alphanumeric, text, replacement)
    
    if policy.user_illegal_symbols:
        user_pattern = _build_user_symbols_pattern(policy.user_illegal_symbols)
        if user_pattern is not None:
            text = _replace_all(user_pattern, text, replacement)
    
    if replacement:
        # Runs of the replacement become a single one
        consecutive = re.compile(f'(?:{re.escape(replacement)})+')
        text = _replace_all(consecutive, text, replacement)
        
        if text.endswith(replacement):
            text = text[:-len(replacement)]
    
    return text


# End of file #
