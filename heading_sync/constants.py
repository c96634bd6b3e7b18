"""Shared constants and configuration."""

import re

# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red', 
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

# Note structure markers
METADATA_DELIMITER = '---'
HEADING_MARKER = '# '
MARKDOWN_EXTENSION = 'md'

# Characters that are never allowed in a note name
STOCK_ILLEGAL_RGX = re.compile(r'[\\/:|#^\[\]]')

# Characters escaped when a user string is turned into a literal pattern
REGEXP_SPECIAL_RGX = re.compile(r'[\\^$*+?.()|\[\]{}]')

# Accented letters transliterated in alphanumeric-only mode
ACCENT_MAP = {
    'á': 'a', 'Á': 'A',
    'é': 'e', 'É': 'E',
    'í': 'i', 'Í': 'I',
    'ó': 'o', 'Ó': 'O',
    'ú': 'u', 'Ú': 'U',
    'ü': 'u', 'Ü': 'U',
    'ñ': 'n', 'Ñ': 'N',
}
ACCENT_RGX = re.compile('[' + ''.join(ACCENT_MAP) + ']')

# Settings file kept in the vault root unless --settings-file is given
DEFAULT_SETTINGS_FILENAME = '.heading-sync.json'

# Seconds between polls in watch mode
DEFAULT_WATCH_INTERVAL = 1.0
