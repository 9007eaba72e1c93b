"""Splits one input file into fixed-size chunk files in a single sequential pass."""

from pathlib import Path
from typing import Optional, Protocol

from common.constants import DEFAULT_PREFIX
from common.exceptions import InvalidInput, IOFailure, UserCancelled
from common.logging_config import get_logger
from common.types import ProgressEvent, ProgressSink, SplitResult
from splitter.chunk_storage import (
    ensure_input_not_overwritten,
    ensure_output_directory,
    existing_chunks_would_collide,
    get_chunk_path,
    list_existing_chunks,
    validate_chunk_size,
)

logger = get_logger(__name__)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


class ChunkWriter:
    """
    Drives a split: validates the output location, checks for existing
    chunks, then reads the input once and writes one file per chunk.

    Usage:
        writer = ChunkWriter()
        if writer.existing_chunks_would_collide(out_dir, "chunk_") and not ask_user():
            return
        result = writer.run(src, out_dir, 1024 * 1024, "chunk_", overwrite_allowed=True)
    """

    def existing_chunks_would_collide(self, output_dir: Path, prefix: str = DEFAULT_PREFIX) -> bool:
        """
        Check whether output_dir already holds {prefix}*.bin files.

        Args:
            output_dir: Target directory
            prefix: Chunk file name prefix

        Returns:
            True if running the split would replace existing chunk files
        """
        return existing_chunks_would_collide(output_dir, prefix)

    def run(
        self,
        input_path: Path,
        output_dir: Path,
        chunk_bytes: int,
        prefix: str = DEFAULT_PREFIX,
        overwrite_allowed: bool = False,
        progress_sink: ProgressSink = None,
        cancel_event: Optional[CancelToken] = None,
    ) -> SplitResult:
        """
        Split input_path into chunk files under output_dir.

        Args:
            input_path: Already-resolved path of the file to split
            output_dir: Directory for chunk files, created if missing
            chunk_bytes: Size of every chunk except possibly the last
            prefix: Chunk file name prefix
            overwrite_allowed: Replace existing {prefix}*.bin files without asking
            progress_sink: Called with a ProgressEvent after each chunk, None to suppress
            cancel_event: Checked once per chunk; when set, the pass stops at the next boundary

        Returns:
            SplitResult with chunk count, bytes written and chunk paths

        Raises:
            InvalidChunkSize: If chunk_bytes is not a positive integer
            InvalidInput: If input_path is not a regular file or is one of the chunk files
            UserCancelled: If chunks exist and overwrite is not allowed, or on cancellation
            DirectoryCreationFailure: If output_dir cannot be created
            IOFailure: If reading or writing fails during the pass
        """
        validate_chunk_size(chunk_bytes)

        input_path = Path(input_path)
        output_dir = Path(output_dir)

        if not input_path.is_file():
            raise InvalidInput(f"Input file not found or not a regular file: {input_path}")

        existing = list_existing_chunks(output_dir, prefix)
        ensure_input_not_overwritten(input_path, existing)
        if existing:
            if not overwrite_allowed:
                logger.info(f"Split declined: {len(existing)} existing chunk file(s) in {output_dir}")
                raise UserCancelled("Existing chunk files would be overwritten")
            logger.warning(f"Overwriting {len(existing)} existing chunk file(s) in {output_dir}")

        ensure_output_directory(output_dir)

        try:
            total_size = input_path.stat().st_size
        except OSError as e:
            raise IOFailure(f"Cannot stat input file {input_path}: {e}", cause=e) from e

        logger.info(
            f"Splitting {input_path} ({total_size} bytes) into {chunk_bytes}-byte chunks "
            f"[output_dir={output_dir}, prefix={prefix}]"
        )

        chunk_paths: list[Path] = []
        total_bytes_written = 0

        try:
            with open(input_path, 'rb') as source:
                buffer = bytearray(chunk_bytes)
                with memoryview(buffer) as view:
                    while True:
                        if cancel_event is not None and cancel_event.is_set():
                            logger.info(f"Split cancelled after {len(chunk_paths)} chunk(s)")
                            raise UserCancelled(
                                "Split cancelled", chunks_written=len(chunk_paths)
                            )

                        bytes_read = source.readinto(buffer)
                        if not bytes_read:
                            break

                        chunk_path = get_chunk_path(output_dir, prefix, len(chunk_paths))
                        with open(chunk_path, 'wb') as target:
                            # short final read: only the fresh bytes, never the stale tail
                            target.write(view[:bytes_read])

                        chunk_paths.append(chunk_path)
                        total_bytes_written += bytes_read
                        logger.debug(f"Wrote {chunk_path.name} ({bytes_read} bytes)")

                        if progress_sink is not None:
                            progress_sink(ProgressEvent(
                                chunk_index=len(chunk_paths),
                                percent=round(total_bytes_written / total_size * 100, 1) if total_size else 100.0,
                                bytes_written=total_bytes_written,
                                total_bytes=total_size,
                            ))
        except OSError as e:
            logger.error(f"I/O failure after {len(chunk_paths)} chunk(s): {e}")
            raise IOFailure(
                f"I/O error while splitting {input_path}: {e}",
                cause=e,
                chunks_written=len(chunk_paths),
            ) from e

        logger.info(f"Split complete: {len(chunk_paths)} chunk(s), {total_bytes_written} bytes")
        return SplitResult(
            chunk_count=len(chunk_paths),
            total_bytes_written=total_bytes_written,
            chunk_paths=tuple(chunk_paths),
        )
