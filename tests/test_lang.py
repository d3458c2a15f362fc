import pytest

from glframe.lang import (
    Language,
    format_text,
    language_code,
    language_from_code,
    replace_placeholders,
    to_text,
)


def test_language_codes_from_source():
    assert language_code(Language.ENGLISH) == "en-US"
    assert language_code(Language.CHINESE_SIMPLIFIED) == "zh-CN"
    assert language_code(Language.CHINESE_TRADITIONAL) == "zh-TW"


@pytest.mark.parametrize("lang", list(Language))
def test_language_round_trip(lang):
    assert language_from_code(language_code(lang)) is lang


@pytest.mark.parametrize("code", ["", "fr-FR", "EN-us"])
def test_unknown_code_falls_back(code):
    assert language_from_code(code) is Language.CHINESE_SIMPLIFIED


def test_to_text_strings_and_ints():
    assert to_text("abc") == "abc"
    assert to_text(42) == str(42)


def test_to_text_float_fixed_precision():
    assert to_text(1.5) == "1.500000"


def test_to_text_bool_is_numeric():
    assert to_text(True) == "1"
    assert to_text(False) == "0"


def test_to_text_other_objects_use_str():
    class Thing:
        def __str__(self):
            return "thing"

    assert to_text(Thing()) == "thing"


def test_replace_all_occurrences():
    assert replace_placeholders("{0}-{0}", "x") == "x-x"


def test_replace_in_order():
    result = replace_placeholders("{1} then {0}", "first", "second")
    assert result == "second then first"


def test_replacement_not_rescanned_for_same_index():
    assert replace_placeholders("{0}", "{0}") == "{0}"


def test_later_index_applies_to_earlier_replacements():
    assert replace_placeholders("{0}", "{1}", "z") == "z"


def test_unused_placeholders_remain():
    assert replace_placeholders("{0} {2}", "a") == "a {2}"


def test_replace_without_args_is_identity():
    assert replace_placeholders("{0}") == "{0}"


def test_format_text_without_args_keeps_template():
    assert format_text("hello {0}") == "hello {0}"


def test_format_text_missing_translation_untouched():
    template = "Missing translation: menu.{0}"
    assert format_text(template, "x") == template


def test_format_text_substitutes_numbers():
    result = format_text("{0} items", 3)
    assert result == to_text(3) + " items"