"""Convert story files into code skeletons on disk.

Drives the parse -> name -> render pipeline over one story or over every
story in the configured folder. A story that fails to convert is logged and
skipped; it never stops a batch and never leaves a partial output file.
"""

import logging
import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import StoryConversionError, StoryEncodingError
from .naming import build_identifier_table
from .render import BaseRenderer, JavaSkeletonRenderer
from .settings import ConverterSettings
from .story.models import ConversionResult
from .story.parser import StoryParser

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    """Outcome of a batch conversion."""

    converted: list[tuple[str, Path]] = field(default_factory=list)  # (story, output)
    failed: list[tuple[str, str]] = field(default_factory=list)  # (story, error message)

    @property
    def ok(self) -> bool:
        return not self.failed


def _write_replacing(path: Path, data: bytes) -> None:
    """Write ``data`` to a temporary file next to ``path`` and move it in place."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except Exception:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class StoryConverter:
    """Convert story files to skeleton source files.

    Example:
        converter = StoryConverter(ConverterSettings(stories_dir=Path("stories")))
        converter.prepare_directories()
        report = converter.convert_all()
    """

    def __init__(
        self,
        settings: ConverterSettings,
        parser: StoryParser | None = None,
        renderer: BaseRenderer | None = None,
    ):
        self.settings = settings
        self.parser = parser or StoryParser()
        self.renderer = renderer or JavaSkeletonRenderer()
        self.stories_dir = settings.stories_dir
        self.target_dir = settings.resolved_target_dir()

    def prepare_directories(self) -> None:
        """Create the story and output folders if they do not exist."""
        for directory in (self.stories_dir, self.target_dir):
            if not directory.exists():
                logger.info(f"Creating directory {directory}")
            directory.mkdir(parents=True, exist_ok=True)

    def discover_stories(self) -> list[Path]:
        """List story files in the stories folder, sorted by name."""
        if not self.stories_dir.is_dir():
            logger.warning(f"Stories directory not found: {self.stories_dir}")
            return []
        return sorted(
            p
            for p in self.stories_dir.resolve().iterdir()
            if p.is_file() and p.name.endswith(self.settings.story_extension)
        )

    def convert_lines(self, lines: Iterable[str], file_name: str) -> ConversionResult:
        """Run the full pipeline on the lines of one story.

        Args:
            lines: Decoded story lines
            file_name: Story file name (no directory), used for the type name

        Returns:
            ConversionResult holding the rendered text

        Raises:
            FormatError: If the story structure is invalid
            NormalizationError: If an identifier cannot be derived
        """
        try:
            record = self.parser.parse(lines)
            identifiers = build_identifier_table(file_name, record)
        except StoryConversionError as e:
            e.source = e.source or file_name
            raise

        return ConversionResult(
            source=file_name,
            type_name=identifiers.type_name,
            text=self.renderer.render(record, identifiers),
            filename=self.renderer.get_filename(identifiers),
        )

    def _resolve_story(self, story: str | Path) -> Path:
        path = Path(story)
        if path.is_absolute():
            return path
        return self.stories_dir / path

    def read_story(self, story: str | Path) -> list[str]:
        """Read the lines of a story file with the configured encoding.

        Raises:
            StoryEncodingError: If the file is not valid in the configured encoding
            OSError: If the file cannot be read
        """
        path = self._resolve_story(story)
        encoding = self.settings.encoding
        try:
            with open(path, encoding=encoding) as f:
                return f.read().splitlines()
        except UnicodeDecodeError as e:
            raise StoryEncodingError(
                f"Cannot decode story as {encoding}: {e.reason} at byte {e.start}",
                encoding=encoding,
                source=path.name,
            ) from e

    def render_file(self, story: str | Path) -> ConversionResult:
        """Convert a story file without writing anything."""
        return self.convert_lines(self.read_story(story), Path(story).name)

    def convert_file(self, story: str | Path) -> Path:
        """Convert one story file and write its skeleton.

        Args:
            story: File name relative to the stories folder, or a path

        Returns:
            Path of the written skeleton

        Raises:
            FormatError: If the story structure is invalid
            NormalizationError: If an identifier cannot be derived
            StoryEncodingError: If the story or skeleton does not fit the encoding
            OSError: If the story cannot be read or the output written
        """
        result = self.render_file(story)

        encoding = self.settings.encoding
        try:
            data = result.text.encode(encoding)
        except UnicodeEncodeError as e:
            unencodable = e.object[e.start : e.end]
            raise StoryEncodingError(
                f"Cannot encode skeleton as {encoding}: {e.reason} for {unencodable!r}",
                encoding=encoding,
                source=result.source,
            ) from e

        destination = self.target_dir / result.filename
        if destination.exists():
            logger.debug(f"Replacing existing {destination}")
        destination.parent.mkdir(parents=True, exist_ok=True)
        _write_replacing(destination, data)

        logger.info(f"Generated {destination} from {result.source}")
        return destination

    def convert_many(self, stories: Iterable[str | Path]) -> ConversionReport:
        """Convert several stories, skipping those that fail."""
        report = ConversionReport()
        written: dict[Path, str] = {}

        for story in stories:
            name = Path(story).name
            try:
                destination = self.convert_file(story)
            except StoryConversionError as e:
                logger.error(f"Skipping {name}: {e.message}")
                report.failed.append((name, e.message))
                continue
            except OSError as e:
                logger.error(f"Skipping {name}: {e}")
                report.failed.append((name, str(e)))
                continue

            if destination in written:
                previous = written[destination]
                logger.warning(
                    f"{name} overwrote {destination.name} previously generated from {previous}"
                )
            written[destination] = name
            report.converted.append((name, destination))

        logger.info(f"Converted {len(report.converted)} stories, {len(report.failed)} failed")
        return report

    def convert_all(self) -> ConversionReport:
        """Convert every story in the stories folder."""
        return self.convert_many(self.discover_stories())
