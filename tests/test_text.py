import pytest

from fractol.text import (
    bounded_concat,
    bounded_copy,
    compare_prefix,
    count_words,
    find_char,
    find_last_char,
    find_substring,
    iter_indexed,
    join,
    map_indexed,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("banana", "a"), ("xyz", "x")])
def test_find_char_first_occurrence(s, c):
    index = find_char(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_find_char_missing_and_none():
    assert find_char("hello", "q") is None
    assert find_char(None, "a") is None


def test_find_char_nul_finds_end():
    assert find_char("hello", "\0") == len("hello")
    assert find_last_char("hello", 0) == len("hello")


def test_find_char_accepts_code():
    assert find_char("abc", ord("c")) == "abc".index("c")


def test_find_char_rejects_long_string():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("banana", "a"), ("xyz", "x")])
def test_find_last_char(s, c):
    index = find_last_char(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_find_last_char_missing():
    assert find_last_char("hello", "z") is None


def test_compare_prefix_equal_within_n():
    assert compare_prefix("mandelbrot", "mandel", 6) == 0
    assert compare_prefix("abc", "abd", 0) == 0


def test_compare_prefix_detects_difference_sign():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0


def test_compare_prefix_counts_terminator():
    assert compare_prefix("julia", "julia", len("julia") + 1) == 0
    assert compare_prefix("juliax", "julia", len("julia") + 1) == ord("x")
    assert compare_prefix("ship", "shipyard", 5) == -ord("y")


def test_compare_prefix_negative_n():
    with pytest.raises(ValueError):
        compare_prefix("a", "b", -1)


def test_find_substring_within_length():
    haystack = "the fractal window"
    index = find_substring(haystack, "fractal", len(haystack))
    assert haystack[index:index + len("fractal")] == "fractal"


def test_find_substring_cut_by_length():
    haystack = "the fractal window"
    start = haystack.index("fractal")
    assert find_substring(haystack, "fractal", start + len("fractal") - 1) is None
    assert find_substring(haystack, "fractal", start + len("fractal")) == start


def test_find_substring_empty_needle():
    assert find_substring("abc", "", 0) == 0


def test_substring_basic_and_bounds():
    s = "fractol"
    assert substring(s, 2, 3) == s[2:5]
    assert substring(s, 0, 100) == s
    assert substring(s, len(s) + 5, 3) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_join_concatenates():
    a, b = "mandel", "brot"
    result = join(a, b)
    assert result.startswith(a) and result.endswith(b)
    assert len(result) == len(a) + len(b)


def test_join_rejects_none():
    with pytest.raises(TypeError):
        join(None, "x")


def test_trim_both_ends():
    assert trim("xx-hello-xy", "xy-") == "hello"
    assert trim("  keep  ", "") == "  keep  "
    assert trim("aaaa", "a") == ""


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_count_words_matches_split():
    for s in ["a b c", "  lead", "trail  ", "", "one"]:
        assert count_words(s, " ") == len(split(s, " "))


def test_split_rejoin_round_trip():
    words = ["mandel", "julia", "ship"]
    assert split(" ".join(words), " ") == words


def test_map_indexed_uses_index():
    result = map_indexed("aaa", lambda i, ch: ch if i % 2 else ch.upper())
    assert result == "AaA"


def test_iter_indexed_modifies_in_place():
    chars = list("abc")
    returned = iter_indexed(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert returned is chars
    assert chars == ["a", "B", "c"]


def test_bounded_copy_truncates_and_reports_length():
    src = "hello"
    text, total = bounded_copy(src, 3)
    assert text == src[:2]
    assert total == len(src)


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_copy_large_buffer():
    assert bounded_copy("hi", 10) == ("hi", 2)


def test_bounded_concat_fits():
    text, total = bounded_concat("foo", "bar", 10)
    assert text == "foobar"
    assert total == len("foobar")


def test_bounded_concat_truncates():
    text, total = bounded_concat("foo", "barbaz", 6)
    assert len(text) == 5
    assert text == "foo" + "barbaz"[:2]
    assert total == len("foo") + len("barbaz")


def test_bounded_concat_small_buffer():
    text, total = bounded_concat("foobar", "xyz", 3)
    assert text == "foobar"
    assert total == 3 + len("xyz")
    assert bounded_concat("abc", "de", 0) == ("abc", len("de"))