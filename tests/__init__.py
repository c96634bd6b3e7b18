"""
Heading Sync Test Suite
File: tests/__init__.py

Test modules for heading location, sanitization, ignore rules,
settings persistence and the sync orchestrator.
"""

__all__ = [
    'test_locator',
    'test_sanitizer',
    'test_ignore_filter',
    'test_settings',
    'test_vault',
    'test_orchestrator',
    'test_cli',
    'test_ui',
]
