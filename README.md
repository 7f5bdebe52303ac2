# cstrkit

Helpers for searching, concatenating and tokenizing strings with the
semantics of NUL-terminated strings: a string ends at its first `"\0"`
character, and anything after it is ignored. There are no pointers here, so
a search does not return a position. It returns the rest of the string from
the match onwards, or `None` when there is no match.

The package has no dependencies beyond the standard library.

## Searching: `cstrkit.search`

```python
from cstrkit.search import memchr, strchr, strpbrk, strrchr, strstr

strchr("hello", "l")            # "llo"
strrchr("hello", "l")           # "lo"
strchr("hello", "z")            # None
strchr("hello", 0)              # "", because the terminator always matches
strstr("hello world", "wor")    # "world"
strstr("abc", "")               # "abc", because an empty needle matches at the start
strpbrk("hello", "xyzo")        # "o"
memchr(b"abc\0def", 0, 7)       # b"\x00def"
```

- `strchr(s, c)` and `strrchr(s, c)` search for the first or the last
  occurrence of a character. `c` may be a one-character string or an
  integer, and an integer is taken modulo 256. Searching for `"\0"` returns
  `""`. `strrchr(None, c)` returns `None`.
- `strstr(haystack, needle)` finds a substring.
- `strpbrk(s, accept)` finds the first character of `s` that is in `accept`.
- `memchr(data, c, n)` works on a `str` or on `bytes` and is not cut short at
  NUL. It searches only the first `n` items and returns the rest of `data`
  from the match onwards. It raises `ValueError` if `n` is negative or larger
  than `len(data)`.

A `c` that is a string of any length other than one raises `ValueError`.

## Concatenation: `cstrkit.helping`

```python
from cstrkit.helping import strcat, strncat

strcat("foo", "bar")            # "foobar"
strncat("foo", "barbaz", 3)     # "foobar"
```

`strncat` raises `ValueError` when the count is negative. Both functions
return a new string.

## Tokenizing: `cstrkit.helping`

`strtok(text, delim)` splits `text` on any character of `delim`. Runs of
delimiters count as one separator, and empty fields are skipped. It returns
a list of the tokens.

```python
from cstrkit.helping import Tokenizer, is_delim, strtok

strtok("  a,b;;c ", " ,;")      # ["a", "b", "c"]
```

`Tokenizer(text, delim)` keeps the scanning state in an object. Each call to
`next()` can use a different delimiter set. If no set is given, it uses the
one passed to the constructor. Once the text is used up, `next()` returns
`None`. Iterating over a `Tokenizer` yields the remaining tokens with the
constructor's delimiters.

```python
tok = Tokenizer("key=value;next", "=")
tok.next("=")   # "key"
tok.next(";")   # "value"
tok.next()      # "next"
tok.next()      # None
```

`is_delim(c, delim)` tells whether the single character `c` is one of
`delim`. `"\0"` is never a delimiter.

```python
is_delim(",", " ,;")            # True
```

## What is not included

The package only searches, concatenates and tokenizes. It has no copy,
compare, length, memory-fill or case-conversion helpers. It has no formatted
output or input in the style of `sprintf`/`sscanf`, and no error-message
lookup.

## Running the tests

```
pip install -e .[test]
pytest
```