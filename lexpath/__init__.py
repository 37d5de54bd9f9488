"""Lexical path manipulation, name portability checks, unique names and encoding conversion."""

__version__ = "0.1.0"
__all__ = ["convert", "parsing", "path", "portability", "unique"]