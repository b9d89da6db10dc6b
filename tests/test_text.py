"""Tests for initials extraction (avatar/text.py).

Single-word and multi-word names are handled differently on purpose:
a single word is cut to `max_segments` characters and uppercased, while
multiple words keep the case of each first letter.
"""
import pytest

from avatar.text import (
    Initials,
    Name,
    StructuredName,
    extract,
    graphemes,
    split_words,
)


class TestInitialsVariant:
    def test_used_verbatim(self):
        assert extract(Initials("xY")) == ("xY", "xY")

    def test_empty(self):
        assert extract(Initials("")) == ("", "")


class TestSingleWordName:
    def test_uppercases_first_two(self):
        """Name("Zoe", 2) -> "ZO"."""
        assert extract(Name("Zoe", 2))[0] == "ZO"

    def test_clamped_to_word_length(self):
        """Name("Zoe", 5) -> "ZOE", never padded."""
        assert extract(Name("Zoe", 5))[0] == "ZOE"

    def test_default_max_is_two(self):
        assert extract(Name("solo"))[0] == "SO"

    def test_single_char_word(self):
        assert extract(Name("x"))[0] == "X"

    def test_surrounding_separators_ignored(self):
        assert extract(Name("  ...Zoe!  "))[0] == "ZO"


class TestMultiWordName:
    def test_natural_case_kept(self):
        """Name("ada lovelace", 2) -> "al", not "AL"."""
        assert extract(Name("ada lovelace", 2))[0] == "al"

    def test_mixed_case(self):
        assert extract(Name("Ada lovelace"))[0] == "Al"

    def test_only_first_max_words(self):
        assert extract(Name("Morgan J Ingram"))[0] == "MJ"
        assert extract(Name("Morgan J Ingram", 3))[0] == "MJI"

    def test_punctuation_splits_words(self):
        assert extract(Name("jean-luc picard"))[0] == "jl"
        assert extract(Name("O'Neil, Shaq"))[0] == "ON"

    def test_unicode_whitespace_splits_words(self):
        assert extract(Name("Ada\u00a0Lovelace"))[0] == "AL"
        assert extract(Name("Ada\u3000Lovelace"))[0] == "AL"

    def test_combining_marks_stay_with_letter(self):
        assert extract(Name("e\u0301mile zola"))[0] == "e\u0301z"

    def test_long_is_original_text(self):
        assert extract(Name("  ada lovelace!", 1))[1] == "  ada lovelace!"


class TestEmptyName:
    def test_empty_string(self):
        assert extract(Name("", 2)) == ("", "")

    def test_only_separators(self):
        assert extract(Name(" - ,. ")) == ("", " - ,. ")

    def test_zero_segments(self):
        assert extract(Name("Zoe", 0))[0] == ""


class TestStructuredName:
    def test_given_family(self):
        assert extract(StructuredName(given_name="John", family_name="Appleseed")) == ("JA", "John Appleseed")

    def test_long_form_has_every_component(self):
        name = StructuredName(
            name_prefix="Dr.",
            given_name="John",
            middle_name="Ulysses",
            family_name="Appleseed",
            name_suffix="Jr.",
        )
        initials, long = extract(name)
        assert initials == "JA"
        assert long == "Dr. John Ulysses Appleseed Jr."

    def test_initials_capped_at_two(self):
        assert len(extract(StructuredName(given_name="A", family_name="B", middle_name="C"))[0]) == 2

    def test_cjk_family_first(self):
        assert extract(StructuredName(given_name="小明", family_name="王")) == ("王小", "王小明")

    def test_forced_family_first(self):
        name = StructuredName(given_name="Ferenc", family_name="Puskás", family_first=True)
        assert extract(name) == ("PF", "Puskás Ferenc")

    def test_nickname_fallback(self):
        assert extract(StructuredName(nickname="Ziggy"))[0] == "Z"

    def test_empty_components(self):
        assert extract(StructuredName()) == ("", "")


class TestHelpers:
    def test_split_words_drops_empty(self):
        assert split_words("  a,, b  ") == ["a", "b"]

    def test_graphemes_keep_modifiers(self):
        assert graphemes("\U0001F44D\U0001F3FDx") == ["\U0001F44D\U0001F3FD", "x"]

    def test_unknown_source(self):
        with pytest.raises(TypeError):
            extract("Ada Lovelace")
