"""Searching within NUL-terminated strings and byte buffers."""

from __future__ import annotations


def _cstr(s):
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c):
    if isinstance(c, int):
        return chr(c % 256)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strchr(s, c):
    """Return *s* from the first occurrence of *c*, or None."""
    text, ch = _cstr(s), _char(c)
    if ch == "\0":
        return ""
    pos = text.find(ch)
    return None if pos < 0 else text[pos:]


def strstr(haystack, needle):
    """Return *haystack* from the first occurrence of *needle*, or None."""
    text, pattern = _cstr(haystack), _cstr(needle)
    pos = text.find(pattern)
    return None if pos < 0 else text[pos:]


def memchr(data, c, n):
    """Return *data* from the first occurrence of *c* in its first *n* items, or None."""
    if not 0 <= n <= len(data):
        raise ValueError(f"length {n} is outside the buffer of size {len(data)}")
    ch = _char(c)
    target = ch if isinstance(data, str) else bytes([ord(ch)])
    pos = data.find(target, 0, n)
    return None if pos < 0 else data[pos:]


def strpbrk(s, accept):
    """Return *s* from the first character found in *accept*, or None."""
    text, wanted = _cstr(s), set(_cstr(accept))
    return next((text[i:] for i, ch in enumerate(text) if ch in wanted), None)


def strrchr(s, c):
    """Return *s* from the last occurrence of *c*, or None."""
    if s is None:
        return None
    text, ch = _cstr(s), _char(c)
    if ch == "\0":
        return ""
    pos = text.rfind(ch)
    return None if pos < 0 else text[pos:]