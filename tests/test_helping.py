import pytest

from cstrkit.helping import Tokenizer, is_delim, strcat, strncat, strtok


def test_strcat_pinned_value():
    assert strcat("Hello, ", "world!") == "Hello, world!"


@pytest.mark.parametrize(
    "dest, src", [("", ""), ("abc", ""), ("", "abc"), ("hello", ", world!")]
)
def test_strcat_joins_both_parts(dest, src):
    result = strcat(dest, src)
    assert result.startswith(dest)
    assert result.endswith(src)
    assert len(result) == len(dest) + len(src)


def test_strcat_stops_at_nul():
    assert strcat("ab\0cd", "ef") == "abef"


@pytest.mark.parametrize("n", [0, 1, 3, 5, 100])
def test_strncat_appends_at_most_n(n):
    dest, src = "Hello", "world"
    result = strncat(dest, src, n)
    assert result.startswith(dest)
    assert len(result) == len(dest) + min(n, len(src))
    assert src.startswith(result[len(dest):])


def test_strncat_zero_leaves_dest():
    assert strncat("Hello", "world", 0) == "Hello"


def test_strncat_rejects_negative_count():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


def test_is_delim():
    assert is_delim(",", ", ") is True
    assert is_delim(" ", ", ") is True
    assert is_delim("a", ", ") is False
    assert is_delim("\0", ", ") is False
    assert is_delim("a", "") is False


def test_strtok_pinned_value():
    assert strtok("hello, world!", ", ") == ["hello", "world!"]


@pytest.mark.parametrize(
    "text, delim",
    [
        ("  a  b c ", " "),
        ("-?hello, world!", "!?-"),
        ("!!!abcdefghij!?!", "!?"),
        ("no delimiters", "#"),
    ],
)
def test_strtok_invariants(text, delim):
    tokens = strtok(text, delim)
    assert all(token for token in tokens)
    assert all(not set(token) & set(delim) for token in tokens)
    stripped = "".join(ch for ch in text if ch not in delim)
    assert "".join(tokens) == stripped


@pytest.mark.parametrize("text", ["", ",,,", ", ,"])
def test_strtok_without_tokens(text):
    assert strtok(text, ", ") == []


def test_tokenizer_exhausted_stays_exhausted():
    tok = Tokenizer("a b", " ")
    assert tok.next() == "a"
    assert tok.next() == "b"
    assert tok.next() is None
    assert tok.next() is None


def test_tokenizer_changes_delimiters_between_calls():
    tok = Tokenizer("a,b;c", ",")
    assert tok.next() == "a"
    assert tok.next(";") == "b"
    assert tok.next(",") == "c"
    assert tok.next() is None


def test_tokenizer_yields_empty_token_when_new_delimiter_is_next():
    tok = Tokenizer("a,;b", ",")
    assert tok.next() == "a"
    assert tok.next(";") == ""
    assert tok.next() == "b"


def test_tokenizer_iteration_continues_after_next():
    tok = Tokenizer("x y z", " ")
    first = tok.next()
    rest = list(tok)
    assert [first, *rest] == strtok("x y z", " ")
    assert list(tok) == []