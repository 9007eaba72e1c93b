"""Manages chunk files on disk: naming, listing, output directory and chunk plans."""

import glob
from pathlib import Path

from common.constants import CHUNK_EXTENSION, CHUNK_INDEX_WIDTH
from common.exceptions import DirectoryCreationFailure, InvalidChunkSize, InvalidInput
from common.types import ChunkDescriptor


def chunk_file_name(prefix: str, index: int) -> str:
    """
    Build the file name for a chunk.

    Indices are zero-padded to four digits; from 10000 on they widen.

    Args:
        prefix: Chunk file name prefix
        index: Zero-based chunk index

    Returns:
        File name such as "chunk_0007.bin"
    """
    return f"{prefix}{index:0{CHUNK_INDEX_WIDTH}d}{CHUNK_EXTENSION}"


def get_chunk_path(output_dir: Path, prefix: str, index: int) -> Path:
    """Get file path for a chunk."""
    return Path(output_dir) / chunk_file_name(prefix, index)


def ensure_output_directory(output_dir: Path) -> None:
    """
    Ensure output directory exists, creating missing parents.

    Raises:
        DirectoryCreationFailure: If the directory cannot be created
    """
    try:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailure(
            f"Cannot create output directory '{output_dir}': {e}"
        ) from e


def list_existing_chunks(output_dir: Path, prefix: str) -> list[Path]:
    """
    List files in the output directory that match {prefix}*.bin.

    Args:
        output_dir: Directory to scan
        prefix: Chunk file name prefix

    Returns:
        Sorted list of matching paths, empty if the directory does not exist
    """
    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        return []

    return sorted(
        path for path in output_dir.glob(f"{glob.escape(prefix)}*{CHUNK_EXTENSION}")
        if path.is_file()
    )


def existing_chunks_would_collide(output_dir: Path, prefix: str) -> bool:
    """Check whether a split into output_dir would replace existing chunk files."""
    return bool(list_existing_chunks(output_dir, prefix))


def plan_chunks(total_size: int, chunk_bytes: int) -> list[ChunkDescriptor]:
    """
    Compute chunk boundaries for a file of total_size bytes.

    Every chunk is chunk_bytes long except possibly the last one.
    An empty file has no chunks.

    Raises:
        InvalidChunkSize: If chunk_bytes is not a positive integer
    """
    validate_chunk_size(chunk_bytes)
    if total_size < 0:
        raise ValueError(f"total_size must be non-negative, got {total_size}")

    return [
        ChunkDescriptor(
            index=index,
            offset=offset,
            length=min(chunk_bytes, total_size - offset),
        )
        for index, offset in enumerate(range(0, total_size, chunk_bytes))
    ]


def validate_chunk_size(chunk_bytes: int) -> None:
    """Reject chunk sizes that are not positive integers."""
    if isinstance(chunk_bytes, bool) or not isinstance(chunk_bytes, int) or chunk_bytes <= 0:
        raise InvalidChunkSize(f"Chunk size must be a positive number of bytes, got {chunk_bytes!r}")


def ensure_input_not_overwritten(input_path: Path, existing_chunks: list[Path]) -> None:
    """
    Refuse a split whose input is one of the chunk files it would rewrite.

    Raises:
        InvalidInput: If input_path is the same file as any existing chunk
    """
    for chunk_path in existing_chunks:
        try:
            same = Path(input_path).samefile(chunk_path)
        except OSError:
            continue
        if same:
            raise InvalidInput(
                f"Input file {input_path} would be overwritten by its own chunk {chunk_path.name}"
            )
