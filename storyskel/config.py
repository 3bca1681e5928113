"""Centralized configuration constants for storyskel.

Single source of truth for the story file format markers, file naming
conventions and default locations used across the package.
"""

from enum import Enum

# =============================================================================
# Story Format
# =============================================================================

# Adds another fragment to the most recently opened clause kind
CONTINUATION_MARKER = "And "

# Everything from this marker to end of line is ignored
COMMENT_MARKER = "#"


class ClauseKind(Enum):
    """Clause kinds of a story, in the order they must appear."""

    GIVEN = "Given "
    WHEN = "When "
    THEN = "Then "

    @property
    def marker(self) -> str:
        """Line prefix that opens this clause kind."""
        return self.value

    @property
    def label(self) -> str:
        """Annotation name used in generated code (e.g. ``Given``)."""
        return self.value.strip()

    @classmethod
    def ordered(cls) -> list["ClauseKind"]:
        """Return all clause kinds in document order."""
        return list(cls)


# =============================================================================
# Files and Directories
# =============================================================================

STORY_EXTENSION = ".story"
DEFAULT_ENCODING = "utf-8"

# Relative to the working directory of the caller
DEFAULT_STORIES_DIR = "src/java/resources/exercises"

# Generated sources go to <stories_dir>/<stories_dir name><suffix>
TARGET_DIR_SUFFIX = "-JAVA"

# Environment variable naming a default YAML settings file (CLI only)
CONFIG_ENV_VAR = "STORYSKEL_CONFIG"
