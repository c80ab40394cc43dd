"""Lexer, syntax checks and command helpers for a small shell, with text, memory and list utilities."""

__version__ = "0.1.0"