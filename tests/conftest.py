"""Shared test fixtures and helpers."""

import shutil
from pathlib import Path

import pytest

from storyskel.settings import ConverterSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"
STORIES_DIR = FIXTURES_DIR / "stories"


OPEN_DOOR_LINES = [
    "Given a door is closed",
    "When I open the door",
    "Then the door is open",
]

OPEN_DOOR_SKELETON = (
    "public class OpenDoor {\n"
    '    @Given("a door is closed")\n'
    "    public void aDoorIsClosed(){\n"
    "        //TODO\n"
    "    }\n"
    "\n"
    '    @When("I open the door")\n'
    "    public void iOpenTheDoor(){\n"
    "        //TODO\n"
    "    }\n"
    "\n"
    '    @Then("the door is open")\n'
    "    public void theDoorIsOpen(){\n"
    "        //TODO\n"
    "    }\n"
    "\n"
    "}"
)


@pytest.fixture
def open_door_lines():
    """Minimal well-formed story."""
    return list(OPEN_DOOR_LINES)


@pytest.fixture
def stories_dir(tmp_path):
    """Copy of the fixture stories in a temporary folder."""
    target = tmp_path / "exercises"
    shutil.copytree(STORIES_DIR, target)
    return target


@pytest.fixture
def settings(stories_dir, tmp_path):
    """Settings reading fixture stories and writing to tmp_path/out."""
    return ConverterSettings(stories_dir=stories_dir, target_dir=tmp_path / "out")


@pytest.fixture
def open_door_skeleton():
    """Expected rendering of the Open-Door story."""
    return OPEN_DOOR_SKELETON
