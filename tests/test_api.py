## strfmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

import strfmt.api as F
from strfmt.errors import FormatIndexError, FormatRecursionError, FormatTypeError


def test_plain_placeholder_is_string_form():
    assert F.format("{0}", "abc") == "abc"
    assert F.format("{0}", 42) == "42"
    assert F.format("{0}", 2.5) == "2.5"


def test_placeholders_share_the_argument_list():
    assert F.format("{1} {0} {1}", "a", "b") == "b a b"


def test_text_that_is_not_a_placeholder_is_kept():
    assert F.format("{x} {0", 1) == "{x} {0"


def test_single_string_argument_is_returned_unchanged():
    assert F.format("{0}") == "{0}"


def test_packed_arguments_are_unpacked():
    assert F.format(["{0}-{1}", "a", "b"]) == "a-b"


def test_index_out_of_range_raises():
    with pytest.raises(FormatIndexError) as info:
        F.format("{0} {2}", "a", "b")
    assert info.value.index == 2
    assert info.value.match == "{2}"
    assert info.value.template == "{0} {2}"
    assert info.value.arguments == ("a", "b")


def test_index_error_is_a_lookup_error():
    with pytest.raises(IndexError):
        F.format("{1}", "only")


def test_padded_string_is_unchanged_without_spec():
    assert F.format("{0}", "  x ") == "  x "


def test_alignment():
    assert F.format("{0:>5}", "x") == "    x"
    assert F.format("{0:<5}", "x") == "x    "
    assert F.format("{0:^5}", "x") == "  x  "
    assert F.format("{0:^4}", "x") == "  x "
    assert F.format("{0:*^7}", "ab") == "***ab**"


def test_zero_padding_keeps_sign_in_front():
    assert F.format("{0:05d}", -3) == "-0003"
    assert F.format("{0:08.3f}", -3.14159) == "-003.142"


def test_numeric_bases():
    assert F.format("{0:x}", 255) == "ff"
    assert F.format("{0:X}", 255) == "FF"
    assert F.format("{0:b}", 5) == "101"
    assert F.format("{0:o}", 8) == "10"
    assert F.format("{0:c}", 65) == "A"


def test_percent():
    assert F.format("{0:.1%}", 0.256) == "25.6%"


def test_thousands_grouping():
    assert F.format("{0:,}", 1234567) == "1,234,567"
    assert F.format("{0:,}", -1234567) == "-1,234,567"
    assert F.format("{0:,.2f}", 1234.5) == "1,234.50"


def test_converter_chain():
    assert F.format("{0!-d}", "5") == "-5"
    assert F.format("{0!b:x}", "1111") == "f"


def test_property_path_with_fallback():
    assert F.format("{0.missing|fallback}", {}) == "fallback"


def test_recursive_modifier():
    assert F.format("{0:{1}}", 3.14159, ".2f") == "3.14"
    assert F.format("{0:>{1}}", "x", 3) == "  x"
    assert F.format("{0[{1}]}", ["a", "b"], 1) == "b"


def test_argument_that_is_a_template():
    assert F.format("{1}", "world", "hello {0}") == "hello world"


def test_self_referencing_argument_raises():
    with pytest.raises(FormatRecursionError):
        F.format("{0}", "{0}")


def test_modifiers_that_never_settle_raise():
    with pytest.raises(FormatRecursionError) as info:
        F.format("{0{1}{2}}", "v", "{", "2}{1}2}")
    assert str(info.value) == "Too many recursions."


def test_structured_replacement_raises():
    with pytest.raises(FormatTypeError) as info:
        F.format("{0}", {"a": 1})
    assert info.value.replacement == {"a": 1}
    assert info.value.match == "{0}"

    with pytest.raises(TypeError):
        F.format("{0}", None)
