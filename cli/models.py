"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SplitCommand:
    """Split a file into chunk files."""

    input_path: str
    output_dir: str | None = None
    chunk_size: str | None = None
    prefix: str | None = None
    overwrite: bool = False
    quiet: bool = False
    json_output: bool = False
    debug: bool = False
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class HelpCommand:
    """Show usage help."""

    command: Literal["help"] = "help"


CommandRequest = SplitCommand | HelpCommand
