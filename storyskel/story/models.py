"""Data models for parsed stories and derived identifiers."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from ..config import ClauseKind


def _field_name(kind: ClauseKind) -> str:
    return kind.name.lower()


@dataclass(frozen=True)
class ClauseRecord:
    """Fragments of one story, grouped by clause kind.

    Each clause kind holds the text of its primary line followed by the
    text of every continuation line attached to it, already comment-stripped
    and whitespace-normalized.
    """

    given: tuple[str, ...]
    when: tuple[str, ...]
    then: tuple[str, ...]

    def __post_init__(self):
        for kind in ClauseKind.ordered():
            if not self.fragments_for(kind):
                raise ValueError(f"Clause record has no fragments for {kind.label}")

    @classmethod
    def from_mapping(cls, fragments: Mapping[ClauseKind, Sequence[str]]) -> "ClauseRecord":
        """Build a record from a clause kind -> fragments mapping."""
        return cls(
            **{_field_name(kind): tuple(fragments.get(kind, ())) for kind in ClauseKind.ordered()}
        )

    def fragments_for(self, kind: ClauseKind) -> tuple[str, ...]:
        return getattr(self, _field_name(kind))

    def items(self) -> Iterator[tuple[ClauseKind, str]]:
        """Yield (clause kind, fragment) pairs in document order."""
        for kind in ClauseKind.ordered():
            for fragment in self.fragments_for(kind):
                yield kind, fragment

    def counts(self) -> dict[ClauseKind, int]:
        """Number of fragments per clause kind."""
        return {kind: len(self.fragments_for(kind)) for kind in ClauseKind.ordered()}


@dataclass(frozen=True)
class IdentifierTable:
    """Type name and per-clause method names derived for one story."""

    type_name: str
    given: tuple[str, ...] = field(default_factory=tuple)
    when: tuple[str, ...] = field(default_factory=tuple)
    then: tuple[str, ...] = field(default_factory=tuple)

    def methods_for(self, kind: ClauseKind) -> tuple[str, ...]:
        return getattr(self, _field_name(kind))

    def matches(self, record: ClauseRecord) -> bool:
        """Check there is exactly one method name per fragment of ``record``."""
        return all(
            len(self.methods_for(kind)) == len(record.fragments_for(kind))
            for kind in ClauseKind.ordered()
        )


@dataclass(frozen=True)
class ConversionResult:
    """Rendered skeleton for one story, ready to be persisted."""

    source: str  # File name of the story
    type_name: str
    text: str
    filename: str  # Output file name, e.g. OpenDoor.java
