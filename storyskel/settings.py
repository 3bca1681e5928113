"""Converter settings.

Settings are plain data passed to the converter by its caller. They can be
loaded from a YAML file:

    stories_dir: stories
    target_dir: generated      # optional, default <stories_dir>/<name>-JAVA
    encoding: utf-8
    story_extension: .story
"""

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .config import DEFAULT_ENCODING, DEFAULT_STORIES_DIR, STORY_EXTENSION, TARGET_DIR_SUFFIX
from .errors import ConfigurationError


class ConverterSettings(BaseModel):
    """Where stories are read from and skeletons written to."""

    stories_dir: Path = Field(default=Path(DEFAULT_STORIES_DIR), description="Story source folder")
    target_dir: Path | None = Field(
        default=None, description="Output folder, defaults to <stories_dir>/<name>-JAVA"
    )
    encoding: str = Field(default=DEFAULT_ENCODING, description="Encoding for reading and writing")
    story_extension: str = Field(default=STORY_EXTENSION, description="Suffix of story files")

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("story_extension")
    @classmethod
    def check_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Story extension must look like '.story', got '{v}'")
        return v

    def resolved_target_dir(self) -> Path:
        """Return the output folder, applying the default when unset."""
        if self.target_dir is not None:
            return self.target_dir
        return self.stories_dir / f"{self.stories_dir.resolve().name}{TARGET_DIR_SUFFIX}"


def _build(data: dict[str, Any], origin: str) -> ConverterSettings:
    try:
        return ConverterSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {origin}: {e}") from e


def load_settings(path: Path) -> ConverterSettings:
    """Load settings from a YAML file.

    Relative directories in the file are resolved against the file's folder.

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")

    for key in ("stories_dir", "target_dir"):
        if data.get(key) is not None:
            directory = Path(data[key])
            if not directory.is_absolute():
                directory = path.parent / directory
            data[key] = directory

    return _build(data, str(path))


def settings_with_overrides(settings: ConverterSettings, **overrides: Any) -> ConverterSettings:
    """Return a copy of ``settings`` with every non-None override applied."""
    data = settings.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return _build(data, "overrides")
