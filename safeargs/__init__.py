"""safeargs - type-safe navigation directions generator."""

__version__ = "0.1.0"
