import pytest

from transitmap.stringutils import (
    capitalize,
    center,
    edit_distance,
    expand_tabs,
    join,
    ljust,
    lower,
    lstrip,
    replace,
    rjust,
    rstrip,
    slice_string,
    split,
    strip,
    upper,
)


def test_slice_basic():
    assert slice_string("new york", 0, 3) == "new"


def test_slice_end_zero_means_whole_tail():
    assert slice_string("new york", 4) == "new york"[4:]


def test_slice_negative_positions_match_python_slicing():
    text = "new york"
    assert slice_string(text, -4) == text[-4:]
    assert slice_string(text, 1, -1) == text[1:-1]


def test_slice_inverted_range_is_empty():
    assert slice_string("new york", 5, 2) == ""


def test_capitalize():
    assert capitalize("cats") == "Cats"
    assert capitalize("cATS") == "Cats"
    assert capitalize("") == ""


def test_upper_lower():
    assert upper("hola") == "HOLA"
    assert lower("Hola") == "hola"


def test_strip_family():
    assert lstrip("   cats") == "cats"
    assert rstrip("cats   ") == "cats"
    assert strip("   cats   ") == "cats"
    assert strip(" \t\r\n") == ""


def test_strip_keeps_inner_whitespace():
    assert strip("  a b  ") == "a b"


def test_center():
    assert center("cats", 10) == "   cats   "


def test_center_odd_padding_extra_on_right():
    result = center("cat", 6, "*")
    assert len(result) == 6
    assert result.startswith("*") and result.endswith("**")
    assert result.strip("*") == "cat"


def test_center_narrow_width_returns_text():
    assert center("cats", 2) == "cats"


def test_ljust_rjust():
    assert ljust("cats", 10) == "cats      "
    assert rjust("cats", 10) == "      cats"
    assert ljust("cats", 3) == "cats"
    assert rjust("cats", 3) == "cats"


def test_fill_must_be_one_character():
    with pytest.raises(ValueError):
        ljust("cats", 10, "ab")
    with pytest.raises(ValueError):
        center("cats", 10, "")


def test_replace():
    assert replace("new york", "york", "cat") == "new cat"
    assert replace("new york", "", "cat") == "new york"


def test_replace_replacement_contains_old():
    assert replace("aa", "a", "aa").count("a") == 4


def test_split_with_separator():
    assert split("pasta is yummy", " ") == ["pasta", "is", "yummy"]


def test_split_whitespace_default():
    assert split("  pasta \t is\nyummy  ") == ["pasta", "is", "yummy"]


def test_split_keeps_empty_fields():
    assert split("a,,b", ",") == ["a", "", "b"]


def test_join():
    assert join("", ["pasta", "is", "yummy"]) == "pastaisyummy"
    assert join(" ", []) == ""


def test_split_join_round_trip():
    text = "pasta is yummy"
    assert join(" ", split(text, " ")) == text


def test_expand_tabs():
    assert expand_tabs("\t", 4) == "    "
    assert expand_tabs("hello\t", 8) == "hello   "
    assert expand_tabs("new\tyork", 4) == "new york"


def test_expand_tabs_zero_removes_tabs():
    assert expand_tabs("a\tb\t", 0) == "ab"


def test_expand_tabs_aligns_to_tab_stops():
    result = expand_tabs("ab\tc\td", 4)
    assert "\t" not in result
    assert result.index("c") % 4 == 0
    assert result.index("d") % 4 == 0


def test_edit_distance():
    assert edit_distance("kitten", "sitting") == 3


def test_edit_distance_ignorecase():
    assert edit_distance("KITTEN", "kitten", True) == 0
    assert edit_distance("KITTEN", "kitten") == len("kitten")


@pytest.mark.parametrize("left,right", [("", "abc"), ("abc", ""), ("flaw", "lawn")])
def test_edit_distance_invariants(left, right):
    assert edit_distance(left, right) == edit_distance(right, left)
    assert edit_distance(left, left) == 0
    assert edit_distance(left, right) <= max(len(left), len(right))
    if not left or not right:
        assert edit_distance(left, right) == len(left) + len(right)