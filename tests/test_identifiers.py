"""Tests for class and method name derivation."""

import pytest

from storyskel.config import ClauseKind
from storyskel.errors import NormalizationError
from storyskel.naming.identifiers import (
    build_identifier_table,
    derive_method_name,
    derive_type_name,
    split_words,
    transform_to_camel_case,
    type_name_for_file,
)
from storyskel.story.models import ClauseRecord


class TestSplitWords:
    """Test splitting on non-alphanumeric runs."""

    def test_splits_on_separators(self):
        assert split_words("open_the-door now") == ["open", "the", "door", "now"]

    def test_drops_empty_words(self):
        assert split_words("--open__door..") == ["open", "door"]

    def test_non_ascii_letters_are_separators(self):
        assert split_words("café au lait") == ["caf", "au", "lait"]

    def test_keeps_digits(self):
        assert split_words("step2of3") == ["step2of3"]

    def test_only_separators_gives_no_words(self):
        assert split_words("-_-") == []


class TestTransformToCamelCase:
    """Test the casing rule."""

    def test_lower_camel_case(self):
        assert transform_to_camel_case(["open", "the", "door"], False) == "openTheDoor"

    def test_upper_camel_case(self):
        assert transform_to_camel_case(["open", "the", "door"], True) == "OpenTheDoor"

    def test_first_word_is_lowered_entirely(self):
        assert transform_to_camel_case(["RESET", "counter"], False) == "resetCounter"
        assert transform_to_camel_case(["RESET", "counter"], True) == "ResetCounter"

    def test_later_words_keep_their_case(self):
        assert transform_to_camel_case(["use", "HTTPS", "mODE"], False) == "useHTTPSMODE"

    def test_single_character_words(self):
        assert transform_to_camel_case(["a", "b", "c"], False) == "aBC"
        assert transform_to_camel_case(["x"], True) == "X"

    def test_empty_words_are_skipped(self):
        assert transform_to_camel_case(["", "open", "", "door"], False) == "openDoor"

    @pytest.mark.parametrize("words", [[], [""], ["", ""]])
    def test_no_words_raises(self, words):
        with pytest.raises(NormalizationError):
            transform_to_camel_case(words, False)


class TestDeriveTypeName:
    """Test type names from file names."""

    @pytest.mark.parametrize(
        "base_name,expected",
        [
            ("Open-Door", "OpenDoor"),
            ("open_the_door", "OpenTheDoor"),
            ("StoryFile", "Storyfile"),
            ("login page 2", "LoginPage2"),
        ],
    )
    def test_derive_type_name(self, base_name, expected):
        assert derive_type_name(base_name) == expected

    def test_type_name_starts_upper_case(self):
        assert derive_type_name("x-ray")[0].isupper()

    def test_unusable_name_raises(self):
        with pytest.raises(NormalizationError) as exc_info:
            derive_type_name("___")
        assert exc_info.value.text == "___"

    def test_type_name_for_file_drops_extension(self):
        assert type_name_for_file("Open-Door.story") == "OpenDoor"
        assert type_name_for_file("open.the.door.story") == "OpenTheDoor"

    def test_type_name_for_file_without_extension(self):
        assert type_name_for_file("Open-Door") == "OpenDoor"


class TestDeriveMethodName:
    """Test method names from clause fragments."""

    @pytest.mark.parametrize(
        "fragment,expected",
        [
            ("open the door", "openTheDoor"),
            ("RESET counter", "resetCounter"),
            ("a door is closed", "aDoorIsClosed"),
            ("I open the door", "iOpenTheDoor"),
        ],
    )
    def test_derive_method_name(self, fragment, expected):
        assert derive_method_name(fragment) == expected

    def test_is_deterministic(self):
        assert derive_method_name("the door is open") == derive_method_name("the door is open")

    def test_no_whitespace_in_result(self):
        assert " " not in derive_method_name("  lots   of   space ")

    def test_empty_fragment_raises(self):
        with pytest.raises(NormalizationError):
            derive_method_name("")


class TestBuildIdentifierTable:
    """Test deriving all identifiers of one story."""

    def test_builds_table_in_fragment_order(self):
        record = ClauseRecord(
            given=("a door is closed",),
            when=("I open the door", "I step through"),
            then=("the door is open",),
        )

        table = build_identifier_table("Open-Door.story", record)

        assert table.type_name == "OpenDoor"
        assert table.methods_for(ClauseKind.WHEN) == ("iOpenTheDoor", "iStepThrough")
        assert table.matches(record)

    def test_empty_fragment_fails(self):
        record = ClauseRecord(given=("",), when=("b",), then=("c",))

        with pytest.raises(NormalizationError):
            build_identifier_table("story.story", record)
