__version__ = "20251018"
