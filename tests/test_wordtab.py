import pytest

from minirt.wordtab import find, find_unquoted, split_words


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  \t c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_blank_text():
    assert split_words(" \t  ") == []


def test_split_words_rejoin_round_trip():
    words = ["3", "2", "3", "1"]
    assert split_words("\t".join(words)) == words


@pytest.mark.parametrize(
    "text, needle",
    [("hello", "ll"), ("hello", "h"), ("hello", "xyz"), ("abc", "abcd"), ("a*/b", "*/")],
)
def test_find_agrees_with_str_find(text, needle):
    assert find(text, needle) == text.find(needle)


def test_find_longer_needle_misses():
    assert find("ab", "abc") == -1


def test_find_empty_needle_raises():
    with pytest.raises(ValueError):
        find("abc", "")


def test_find_unquoted_skips_quoted_match():
    text = '"/*" /* x */'
    assert find_unquoted(text, "/*") == text.index("/*", 4)


def test_find_unquoted_only_quoted_occurrence():
    assert find_unquoted('"a"', "a") == -1


def test_find_unquoted_plain_text_matches_find():
    text = "abc // def"
    assert find_unquoted(text, "//") == find(text, "//")


def test_find_unquoted_empty_needle_raises():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")