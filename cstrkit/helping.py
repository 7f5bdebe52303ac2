"""Concatenation and tokenising of NUL-terminated strings."""

from __future__ import annotations


def _cstr(s):
    end = s.find("\0")
    return s if end < 0 else s[:end]


def strcat(dest, src):
    """Return *src* appended to *dest*."""
    return _cstr(dest) + _cstr(src)


def strncat(dest, src, n):
    """Return at most *n* characters of *src* appended to *dest*."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _cstr(dest) + _cstr(src)[:n]


def is_delim(c, delim):
    """Tell whether character *c* is one of *delim*; NUL never is."""
    return len(c) == 1 and c != "\0" and c in _cstr(delim)


class Tokenizer:
    """Splits a string into tokens separated by runs of delimiter characters."""

    def __init__(self, text, delim):
        self._text = _cstr(text)
        self._delim = delim
        self._pos = self._skip(0, delim)

    def _skip(self, pos, delim):
        while pos < len(self._text) and is_delim(self._text[pos], delim):
            pos += 1
        return pos

    def next(self, delim=None):
        """Return the next token, or None once the text is exhausted."""
        delim = self._delim if delim is None else delim
        if self._pos is None or self._pos >= len(self._text):
            self._pos = None
            return None
        start = end = self._pos
        while end < len(self._text) and not is_delim(self._text[end], delim):
            end += 1
        self._pos = self._skip(end, delim)
        return self._text[start:end]

    def __iter__(self):
        while (token := self.next()) is not None:
            yield token


def strtok(text, delim):
    """Return all tokens of *text* separated by characters of *delim*."""
    return list(Tokenizer(text, delim))