import pytest
from minigrep.core.search.service import (
    split_lines,
    search,
    search_case_insensitive,
    search_lines,
)

RUST_DUCT = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."
RUST_TRUST = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."


def test_one_result():
    assert search("duct", RUST_DUCT) == ["safe, fast, productive."]


def test_case_insensitive():
    assert search_case_insensitive("rUsT", RUST_TRUST) == ["Rust:", "Trust me."]


def test_case_insensitive_keeps_original_casing():
    contents = "To here\nbut not there.\nhere to there."
    assert search_case_insensitive("tO", contents) == ["To here", "here to there."]


def test_search_preserves_order_and_duplicates():
    contents = "b to\na\nc to\nb to"
    assert search("to", contents) == ["b to", "c to", "b to"]


@pytest.mark.parametrize("query", ["", "x", "Rust"])
def test_empty_contents(query):
    assert search(query, "") == []
    assert search_case_insensitive(query, "") == []


def test_empty_query_matches_every_line():
    assert search("", "a\n\nb\n") == ["a", "", "b"]
    assert search_case_insensitive("", "A\nB") == ["A", "B"]


def test_no_match():
    assert search("zzz", RUST_DUCT) == []
    assert search_case_insensitive("ZZZ", RUST_DUCT) == []


def test_idempotent():
    first = search_case_insensitive("RUST", RUST_TRUST)
    second = search_case_insensitive("RUST", RUST_TRUST)
    assert first == second
    assert search("fast", RUST_DUCT) == search("fast", RUST_DUCT)


def test_split_lines_trailing_newline():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("\n") == [""]
    assert split_lines("") == []


def test_split_lines_crlf():
    assert split_lines("one\r\ntwo\r\n") == ["one", "two"]


def test_split_lines_only_newline_is_a_boundary():
    # str.splitlines() would break these apart
    assert split_lines("a\x0bb\u2028c\nd") == ["a\x0bb\u2028c", "d"]


def test_crlf_not_leaked_into_results():
    assert search("two", "one\r\ntwo\r\n") == ["two"]


def test_unicode_case_folding():
    contents = "ÄPFEL und Birnen\nÖl\nΣΟΦΙΑ"
    assert search_case_insensitive("äpfel", contents) == ["ÄPFEL und Birnen"]
    assert search_case_insensitive("σοφ", contents) == ["ΣΟΦΙΑ"]
    # case-sensitive search does not fold
    assert search("äpfel", contents) == []


def test_results_are_lines_of_contents():
    contents = "Alpha\nbeta ALPHA\ngamma"
    lines = contents.split("\n")
    for line in search_case_insensitive("alpha", contents):
        assert line in lines
        assert "alpha" in line.lower()


def test_search_lines_dispatch():
    assert search_lines("rust", RUST_TRUST, case_sensitive=True) == ["Trust me."]
    assert search_lines("rust", RUST_TRUST, case_sensitive=False) == ["Rust:", "Trust me."]
