"""C-style memory, string, number-conversion, formatting and error-message helpers."""

__version__ = "0.1.0"
__all__ = ["cstr", "formatting", "memory", "numconv", "strerror", "transform"]