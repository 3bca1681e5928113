"""Tests for the Java skeleton renderer."""

import pytest

from storyskel.naming import build_identifier_table
from storyskel.render import JavaSkeletonRenderer
from storyskel.story.models import ClauseRecord, IdentifierTable
from storyskel.story.parser import StoryParser


@pytest.fixture
def renderer():
    return JavaSkeletonRenderer()


@pytest.fixture
def open_door(open_door_lines):
    record = StoryParser().parse(open_door_lines)
    return record, build_identifier_table("Open-Door.story", record)


class TestJavaSkeletonRenderer:
    """Test skeleton output."""

    def test_renders_expected_skeleton(self, renderer, open_door, open_door_skeleton):
        record, identifiers = open_door

        assert renderer.render(record, identifiers) == open_door_skeleton

    def test_rendering_is_pure(self, renderer, open_door):
        record, identifiers = open_door

        assert renderer.render(record, identifiers) == renderer.render(record, identifiers)

    def test_ends_with_closing_brace(self, renderer, open_door):
        text = renderer.render(*open_door)

        assert text.endswith("    }\n\n}")
        assert not text.endswith("\n")

    def test_continuations_render_with_clause_label(self, renderer):
        record = ClauseRecord(
            given=("a door is closed",),
            when=("I open the door", "I step through"),
            then=("the door is open",),
        )
        identifiers = build_identifier_table("Open-Door.story", record)

        text = renderer.render(record, identifiers)

        assert text.count('@When("') == 2
        assert '@When("I step through")\n    public void iStepThrough(){' in text
        assert text.index("iOpenTheDoor") < text.index("iStepThrough") < text.index("theDoorIsOpen")

    def test_fragment_text_is_emitted_literally(self, renderer):
        record = ClauseRecord(given=("RESET counter",), when=("b",), then=("c",))
        identifiers = build_identifier_table("x.story", record)

        text = renderer.render(record, identifiers)

        assert '@Given("RESET counter")\n    public void resetCounter(){' in text

    def test_mismatched_identifiers_raise(self, renderer, open_door):
        record, _ = open_door
        identifiers = IdentifierTable("OpenDoor", given=("a",), when=(), then=("c",))

        with pytest.raises(ValueError):
            renderer.render(record, identifiers)

    def test_filename(self, renderer, open_door):
        _, identifiers = open_door

