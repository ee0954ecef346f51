"""Compose classes from stackable parts: wrappers, static data, stored values and change tracking."""

__version__ = "1.0.0"
__all__ = ["parts", "data", "items", "demo"]