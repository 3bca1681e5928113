"""Command line entry point.

Usage:
    storyskel                          # convert every story in the stories dir
    storyskel Open-Door.story          # convert selected stories
    storyskel --stories-dir stories --target-dir generated
    storyskel --config storyskel.yaml --stdout
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import CONFIG_ENV_VAR
from .converter import StoryConverter
from .errors import ConfigurationError, StoryConversionError
from .logging_config import LoggingConfig, setup_logging
from .settings import ConverterSettings, load_settings, settings_with_overrides

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storyskel",
        description="Generate Java class skeletons from Given/When/Then story files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "stories",
        nargs="*",
        help="Story files to convert (default: every story in the stories directory)",
    )
    parser.add_argument("--stories-dir", type=Path, help="Folder containing story files")
    parser.add_argument("--target-dir", type=Path, help="Folder for generated skeletons")
    parser.add_argument("--encoding", type=str, help="Encoding of story and output files")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML settings file (default: ${CONFIG_ENV_VAR} if set)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print skeletons instead of writing files",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def resolve_settings(args: argparse.Namespace) -> ConverterSettings:
    """Combine the settings file (if any) with command line overrides."""
    config_path = args.config
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])

    settings = load_settings(config_path) if config_path else ConverterSettings()
    return settings_with_overrides(
        settings,
        stories_dir=args.stories_dir,
        target_dir=args.target_dir,
        encoding=args.encoding,
    )


def _print_skeletons(converter: StoryConverter, stories: list[str | Path]) -> int:
    exit_code = EXIT_OK
    for story in stories:
        try:
            result = converter.render_file(story)
        except (StoryConversionError, OSError) as e:
            logger.error(f"Skipping {Path(story).name}: {e}")
            exit_code = EXIT_FAILURES
            continue
        print(f"// {result.filename}")
        print(result.text)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for story conversion."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging_config = LoggingConfig.from_env()
    if args.verbose:
        logging_config.log_level = "DEBUG"
    setup_logging(logging_config)

    try:
        settings = resolve_settings(args)
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    converter = StoryConverter(settings)
    stories = args.stories or converter.discover_stories()

    if args.stdout:
        return _print_skeletons(converter, stories)

    converter.prepare_directories()
    report = converter.convert_many(stories)
    return EXIT_OK if report.ok else EXIT_FAILURES


if __name__ == "__main__":
    sys.exit(main())
