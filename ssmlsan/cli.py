"""
Command-line interface for ssmlsan.

Reads text from an argument or stdin and writes the processed text to
stdout:

- ``escape``: escape for SSML, keeping the configured preserve tags
- ``strip``: strip Markdown into plain narration text
- ``sanitize``: strip, then escape
"""

import sys
import logging
import argparse

from .config import SSMLConfig, load_config
from .consts import FORMAT
from .exceptions import ConfigError
from .processor import SSMLProcessor

logger = logging.getLogger("ssmlsan")

COMMANDS = ("escape", "strip", "sanitize")


def parse_args(argv: list[str] | None = None) -> dict:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Prepare text for SSML speech-synthesis requests."
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="What to do with the text.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to process, defaults to reading stdin.",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="YAML configuration file with ssml.preserve_tags.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    return vars(parser.parse_args(argv))


def build_processor(config_path: str | None) -> SSMLProcessor:
    """Build the processor from a config file, or the built-in tags."""
    if config_path is None:
        ssml_config = SSMLConfig()
    else:
        logger.debug(f"Loading configuration from {config_path}")
        ssml_config = load_config(config_path).ssml
    return SSMLProcessor.from_config(ssml_config)


def run(args: dict) -> str:
    processor = build_processor(args["config"])

    text = args["text"]
    if text is None:
        text = sys.stdin.read()

    command = args["command"]
    if command == "escape":
        return processor.escape_ssml(text)
    if command == "strip":
        return processor.strip_markdown(text)
    return processor.sanitize(text)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        format=FORMAT,
        level=logging.DEBUG if args["verbose"] else logging.WARNING,
    )
    try:
        output = run(args)
    except ConfigError as e:
        logger.error(str(e))
        return 1
    sys.stdout.write(output)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
