"""Base renderer class for skeleton renderers."""

from abc import ABC, abstractmethod

from ..story.models import ClauseRecord, IdentifierTable


class BaseRenderer(ABC):
    """Base class for all skeleton renderers."""

    file_extension: str = "txt"

    @abstractmethod
    def render(self, record: ClauseRecord, identifiers: IdentifierTable) -> str:
        """Render a skeleton for one story.

        Args:
            record: Parsed clause fragments
            identifiers: Type and method names derived for the story

        Returns:
            Source code text
        """
        pass

    def get_filename(self, identifiers: IdentifierTable) -> str:
        """Output file name for a story.

        Args:
            identifiers: Identifier table of the story

        Returns:
            File name built from the type name and the renderer's extension
        """
        return f"{identifiers.type_name}.{self.file_extension}"

    def check_identifiers(self, record: ClauseRecord, identifiers: IdentifierTable) -> None:
        """Raise ValueError unless there is one method name per fragment."""
        if not identifiers.matches(record):
            raise ValueError(
                f"Identifier table for {identifiers.type_name} does not match the clause record"
            )
