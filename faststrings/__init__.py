"""C-style byte-string, wide-string, wide-memory, tokenizing and error-message routines."""

__version__ = "0.1.0"
__all__ = ["cstring", "errors", "tokens", "wide", "wmem"]