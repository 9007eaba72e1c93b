"""Utility functions for CLI output."""

import sys
from typing import Optional, TextIO

from common.types import ProgressEvent
from splitter.schemas import SplitSummary
from cli.constants import GREEN, RESET, YELLOW


class ConsoleProgress:
    """Progress sink that prints one status line per written chunk."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        """
        Initialize the console progress sink.

        Args:
            stream: Output stream (defaults to stdout)
            color: Wrap the percentage in ANSI colour codes
        """
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def __call__(self, event: ProgressEvent) -> None:
        """Print the status line for a finished chunk."""
        percent = f"{event.percent:.1f}%"
        if self.color:
            percent = f"{GREEN}{percent}{RESET}"
        self.stream.write(
            f"Chunk {event.chunk_index} written: "
            f"{format_file_size(event.bytes_written)} / {format_file_size(event.total_bytes)} ({percent})\n"
        )
        self.stream.flush()


def format_summary(summary: SplitSummary, color: bool = True) -> str:
    """
    Render the one-line summary shown at the end of a run.

    Args:
        summary: Split summary
        color: Use ANSI colour codes

    Returns:
        Summary line
    """
    if summary.cancelled:
        line = f"Cancelled: no chunks written to {summary.output_dir}"
        return f"{YELLOW}{line}{RESET}" if color else line

    line = (
        f"Done: {summary.chunk_count} chunk(s), {summary.total_bytes} bytes "
        f"({format_file_size(summary.total_bytes)}) written to {summary.output_dir}"
    )
    return f"{GREEN}{line}{RESET}" if color else line


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
