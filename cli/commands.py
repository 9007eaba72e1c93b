"""Command handler functions for CLI operations."""

import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from prompt_toolkit import PromptSession

from common.constants import OUTPUT_DIR_SUFFIX
from common.exceptions import InvalidInput
from common.logging_config import get_logger
from splitter.chunk_storage import (
    ensure_input_not_overwritten,
    list_existing_chunks,
    validate_chunk_size,
)
from splitter.chunk_writer import ChunkWriter
from splitter.schemas import SplitSummary
from splitter.size_parser import parse_size
from cli.config import Config
from cli.constants import STYLE
from cli.models import SplitCommand
from cli.parser import validate_prefix
from cli.utils import ConsoleProgress

logger = get_logger(__name__)

ConfirmFn = Callable[[int, Path], bool]


def resolve_input_path(raw_path: str) -> Path:
    """
    Resolve the input argument to an absolute path of an existing file.

    Raises:
        InvalidInput: If the path does not exist or is not a regular file
    """
    path = Path(raw_path).expanduser()
    if not path.exists():
        raise InvalidInput(f"Input file not found: {raw_path}")
    if not path.is_file():
        raise InvalidInput(f"Input path is not a regular file: {raw_path}")
    return path.resolve()


def default_output_dir(input_path: Path) -> Path:
    """
    Derive the default output directory for an input file.

    Returns:
        <input dir>/<input name without extension>_chunks
    """
    return input_path.parent / f"{input_path.stem}{OUTPUT_DIR_SUFFIX}"


def confirm_overwrite(existing_count: int, output_dir: Path) -> bool:
    """
    Ask the user whether existing chunk files may be overwritten.

    Returns:
        True on an explicit yes; no, an empty answer, Ctrl-C and end of input all decline
    """
    session: PromptSession = PromptSession(style=STYLE)
    message = [
        ("class:question", f"{existing_count} chunk file(s) already exist in {output_dir}. Overwrite?"),
        ("", " [y/N] "),
    ]
    try:
        while True:
            answer = session.prompt(message).strip().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("", "n", "no"):
                return False
    except (EOFError, KeyboardInterrupt):
        return False


def handle_split(
    cmd: SplitCommand,
    config: Optional[Config] = None,
    writer: Optional[ChunkWriter] = None,
    confirm_fn: Optional[ConfirmFn] = None,
    stream: Optional[TextIO] = None,
) -> SplitSummary:
    """
    Handle the split command.

    Args:
        cmd: SplitCommand with input path and options
        config: Optional Config for dependency injection (testing)
        writer: Optional ChunkWriter for dependency injection (testing)
        confirm_fn: Called with (existing chunk count, output dir) before overwriting
        stream: Where per-chunk progress lines go (defaults to stdout)

    Returns:
        Summary of the run; cancelled=True if the user declined to overwrite

    Raises:
        SplitterError: On validation or I/O failure
        ParseError: If the configured prefix is invalid
    """
    if config is None:
        config = Config()
    if writer is None:
        writer = ChunkWriter()
    if confirm_fn is None:
        confirm_fn = confirm_overwrite

    input_path = resolve_input_path(cmd.input_path)
    if cmd.output_dir:
        output_dir = Path(cmd.output_dir).expanduser().resolve()
    else:
        output_dir = default_output_dir(input_path)

    chunk_bytes = parse_size(cmd.chunk_size or config.get_chunk_size())
    validate_chunk_size(chunk_bytes)

    prefix = cmd.prefix or config.get_prefix()
    validate_prefix(prefix)

    logger.info(f"Executing split command: input={input_path} output_dir={output_dir} chunk_bytes={chunk_bytes}")

    overwrite = cmd.overwrite
    if not overwrite and writer.existing_chunks_would_collide(output_dir, prefix):
        existing = list_existing_chunks(output_dir, prefix)
        ensure_input_not_overwritten(input_path, existing)
        if not confirm_fn(len(existing), output_dir):
            logger.info("Split cancelled by user")
            return SplitSummary(
                input_path=str(input_path),
                output_dir=str(output_dir),
                chunk_size=chunk_bytes,
                chunk_count=0,
                total_bytes=0,
                cancelled=True,
            )
        overwrite = True

    progress_sink = None
    if not (cmd.quiet or cmd.json_output):
        stream = stream if stream is not None else sys.stdout
        progress_sink = ConsoleProgress(stream, color=stream.isatty())

    result = writer.run(
        input_path,
        output_dir,
        chunk_bytes,
        prefix=prefix,
        overwrite_allowed=overwrite,
        progress_sink=progress_sink,
    )

    logger.debug("Split command completed")
    return SplitSummary(
        input_path=str(input_path),
        output_dir=str(output_dir),
        chunk_size=chunk_bytes,
        chunk_count=result.chunk_count,
        total_bytes=result.total_bytes_written,
        chunk_files=[path.name for path in result.chunk_paths],
    )
