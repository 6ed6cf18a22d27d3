import pytest

from numdiff.equality import LineEquality, char_editable, line_editable, lines_equal


@pytest.mark.parametrize(
    "a, b",
    [
        ("bar2224", "bar234423"),
        ("", ""),
        ("total: 10 items", "total: 12 items"),
        ("x = 1", "x = 1000"),
        ("12", ""),
        ("v1.2.3", "v10.20.30"),
    ],
)
def test_lines_differing_only_in_digits_are_equal(a, b):
    assert lines_equal(a, b)


@pytest.mark.parametrize(
    "a, b",
    [
        ("baz5", "qux3"),
        ("abc", "abd"),
        ("v1.2", "v1-2"),
        ("x = 1", "x = -1"),
        ("", "a"),
    ],
)
def test_lines_with_other_differences_are_distinct(a, b):
    assert not lines_equal(a, b)


def test_moving_a_digit_across_a_letter_is_a_change():
    # the cheapest alignment keeps the digit and drops the letter
    assert not lines_equal("1a", "a1")


def test_unicode_digits_are_numeric():
    assert lines_equal("x٣", "x7")


@pytest.mark.parametrize("char, expected", [("a", True), ("7", False), (" ", True)])
def test_char_editable(char, expected):
    assert char_editable(char) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("123", False), ("12a", True), (" 12", True), ("", True), ("²", False)],
)
def test_line_editable(line, expected):
    assert line_editable(line) is expected


class TestLineEquality:
    def test_it_agrees_with_lines_equal(self):
        equal = LineEquality()
        assert equal("bar2224", "bar234423") is True
        assert equal("baz5", "qux3") is False

    def test_it_reuses_cached_comparisons(self):
        equal = LineEquality()
        equal("a1", "a2")
        equal("a1", "a2")
        assert equal.hits == 1
        assert equal.cache == {("a1", "a2"): True}

    def test_identical_lines_skip_the_cache(self):
        equal = LineEquality()
        assert equal("same", "same")
        assert equal.cache == {}
