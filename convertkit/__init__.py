"""Uniform value conversion with optional results, fallbacks and interchangeable converters."""

__version__ = "1.0.0"

__all__ = ["core", "demo", "lexical", "parameters", "printf", "strtol", "traits"]