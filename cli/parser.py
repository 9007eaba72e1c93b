"""Command-line argument parser for the CLI."""

import re
from typing import Optional

from common.constants import PREFIX_PATTERN
from cli.models import CommandRequest, HelpCommand, SplitCommand


class ParseError(Exception):
    """Raised when command-line parsing fails."""

    pass


VALUE_OPTIONS = {
    "-o": "output_dir",
    "--output-dir": "output_dir",
    "-s": "chunk_size",
    "--chunk-size": "chunk_size",
    "-p": "prefix",
    "--prefix": "prefix",
}

FLAG_OPTIONS = {
    "-y": "overwrite",
    "--overwrite": "overwrite",
    "-q": "quiet",
    "--quiet": "quiet",
    "--json": "json_output",
    "--debug": "debug",
}

HELP_OPTIONS = ("-h", "--help")

_PREFIX_RE = re.compile(PREFIX_PATTERN)


def parse_command(argv: list[str]) -> CommandRequest:
    """Parse command-line arguments into a CommandRequest object.

    Args:
        argv: Arguments without the program name

    Returns:
        SplitCommand, or HelpCommand if -h/--help was given

    Raises:
        ParseError: If arguments are missing, unknown or invalid
    """
    if any(arg in HELP_OPTIONS for arg in _options_part(argv)):
        return HelpCommand()

    values: dict[str, object] = {}
    positionals: list[str] = []
    options_done = False
    index = 0

    while index < len(argv):
        arg = argv[index]
        index += 1

        if options_done or arg == "-" or not arg.startswith("-"):
            positionals.append(arg)
            continue

        if arg == "--":
            options_done = True
            continue

        name, inline_value = _split_inline_value(arg)

        if name in FLAG_OPTIONS:
            if inline_value is not None:
                raise ParseError(f"{name} does not take a value")
            values[FLAG_OPTIONS[name]] = True
        elif name in VALUE_OPTIONS:
            if inline_value is None:
                if index >= len(argv):
                    raise ParseError(f"{name} requires a value")
                inline_value = argv[index]
                index += 1
            values[VALUE_OPTIONS[name]] = inline_value
        else:
            raise ParseError(f"Unknown option: {arg}")

    if not positionals:
        raise ParseError("missing required argument: INPUT")
    if len(positionals) > 1:
        raise ParseError(f"expected exactly one input file, got {len(positionals)}: {' '.join(positionals)}")

    input_path = positionals[0]
    if not input_path.strip():
        raise ParseError("input file path is empty")

    prefix = values.get("prefix")
    if prefix is not None:
        validate_prefix(prefix)

    output_dir = values.get("output_dir")
    if output_dir is not None and not output_dir.strip():
        raise ParseError("output directory is empty")

    return SplitCommand(input_path=input_path, **values)


def validate_prefix(prefix: str) -> None:
    """Check that a chunk prefix only uses letters, digits, '_' and '-'."""
    if not _PREFIX_RE.fullmatch(prefix):
        raise ParseError(
            f"Invalid prefix '{prefix}': only letters, digits, '_' and '-' are allowed"
        )


def _split_inline_value(arg: str) -> tuple[str, Optional[str]]:
    """Split '--name=value' into ('--name', 'value')."""
    if arg.startswith("--") and "=" in arg:
        name, value = arg.split("=", 1)
        return name, value
    return arg, None


def _options_part(argv: list[str]) -> list[str]:
    """Return the arguments before a '--' separator."""
    try:
        return argv[:argv.index("--")]
    except ValueError:
        return argv
