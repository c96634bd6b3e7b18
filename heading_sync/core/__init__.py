"""
Core sync machinery for Heading Sync.
File: heading_sync/core/__init__.py
"""
