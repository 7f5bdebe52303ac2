"""Search, concatenation and tokenizing helpers with NUL-terminated string semantics."""

__version__ = "0.1.0"
__all__ = ["search", "helping"]