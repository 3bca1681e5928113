"""Parser for Given/When/Then story files.

Expected input format:

    Given a door is closed       # optional comment
    And the key is in the lock
    When I open the door
    Then the door is open

Exactly one primary line per clause kind, in the order Given, When, Then.
"And" lines add fragments to the most recently opened clause kind. Lines
that match neither are ignored.
"""

import logging
import re
from collections.abc import Iterable
from enum import Enum

from ..config import COMMENT_MARKER, CONTINUATION_MARKER, ClauseKind
from ..errors import FormatError
from .models import ClauseRecord

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def strip_comment(text: str, comment_marker: str = COMMENT_MARKER) -> str:
    """Drop everything from the first comment marker to the end of the line."""
    index = text.find(comment_marker)
    if index == -1:
        return text
    return text[:index]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def clean_fragment(text: str, comment_marker: str = COMMENT_MARKER) -> str:
    """Strip the trailing comment, then normalize whitespace."""
    return normalize_whitespace(strip_comment(text, comment_marker))


class ParserState(Enum):
    """States of the clause acceptor."""

    AWAITING_GIVEN = 0
    AWAITING_WHEN = 1
    AWAITING_THEN = 2
    COMPLETE = 3


# state -> (clause kind accepted in that state, next state)
TRANSITIONS: dict[ParserState, tuple[ClauseKind, ParserState]] = {
    ParserState.AWAITING_GIVEN: (ClauseKind.GIVEN, ParserState.AWAITING_WHEN),
    ParserState.AWAITING_WHEN: (ClauseKind.WHEN, ParserState.AWAITING_THEN),
    ParserState.AWAITING_THEN: (ClauseKind.THEN, ParserState.COMPLETE),
}


class _Acceptor:
    """Walks story lines through the clause state machine."""

    def __init__(self, continuation_marker: str, comment_marker: str):
        self.continuation_marker = continuation_marker
        self.comment_marker = comment_marker
        self.state = ParserState.AWAITING_GIVEN
        self.current: ClauseKind | None = None
        self.fragments: dict[ClauseKind, list[str]] = {}

    def feed(self, line: str, line_number: int) -> None:
        if line.startswith(self.continuation_marker):
            if self.current is None:
                raise FormatError(
                    f"Line {line_number}: '{self.continuation_marker.strip()}' "
                    "appears before any Given/When/Then clause",
                    line_number=line_number,
                )
            fragment = clean_fragment(line[len(self.continuation_marker) :], self.comment_marker)
            self.fragments[self.current].append(fragment)
            return

        transition = TRANSITIONS.get(self.state)
        if transition is None:
            return

        kind, next_state = transition
        if line.startswith(kind.marker):
            fragment = clean_fragment(line[len(kind.marker) :], self.comment_marker)
            self.fragments[kind] = [fragment]
            self.current = kind
            self.state = next_state

    @property
    def missing(self) -> list[ClauseKind]:
        return [kind for kind in ClauseKind.ordered() if kind not in self.fragments]


class StoryParser:
    """Parse story file lines into a ClauseRecord.

    Example:
        parser = StoryParser()
        record = parser.parse(path.read_text().splitlines())
        record.fragments_for(ClauseKind.WHEN)  # ("I open the door",)
    """

    def __init__(
        self,
        continuation_marker: str = CONTINUATION_MARKER,
        comment_marker: str = COMMENT_MARKER,
    ):
        self.continuation_marker = continuation_marker
        self.comment_marker = comment_marker

    def parse(self, lines: Iterable[str]) -> ClauseRecord:
        """Parse story lines.

        Args:
            lines: Decoded text lines of one story, without line terminators

        Returns:
            ClauseRecord with the fragments of every clause kind

        Raises:
            FormatError: If an "And" line precedes every clause, or a clause
                kind is missing from the document
        """
        acceptor = _Acceptor(self.continuation_marker, self.comment_marker)
        for line_number, line in enumerate(lines, start=1):
            acceptor.feed(line.rstrip("\r\n"), line_number)

        if acceptor.state is not ParserState.COMPLETE:
            missing = acceptor.missing
            labels = ", ".join(kind.label for kind in missing)
            raise FormatError(f"Incomplete story, missing clauses: {labels}", missing=missing)

        record = ClauseRecord.from_mapping(acceptor.fragments)
        logger.debug(
            "Parsed story: "
            + ", ".join(f"{kind.label}={count}" for kind, count in record.counts().items())
        )
        return record

    def missing_clauses(self, lines: Iterable[str]) -> list[ClauseKind]:
        """Return the clause kinds a story never opens.

        Continuation lines are ignored here, so this reports structure only
        and never raises.
        """
        acceptor = _Acceptor(self.continuation_marker, self.comment_marker)
        for line_number, line in enumerate(lines, start=1):
            if line.startswith(self.continuation_marker):
                continue
            acceptor.feed(line.rstrip("\r\n"), line_number)
        return acceptor.missing
