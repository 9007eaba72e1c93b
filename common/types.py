"""Shared data type definitions (ChunkDescriptor, ProgressEvent, SplitResult)."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional


@dataclass(frozen=True)
class ChunkDescriptor:
    """
    One entry of a chunk plan: which slice of the input a chunk file holds.
    """
    index: int
    offset: int
    length: int


@dataclass(frozen=True)
class ProgressEvent:
    """
    Emitted after every chunk written.

    chunk_index is the number of chunks completed so far, percent is the
    share of the input written, rounded to one decimal place.
    """
    chunk_index: int
    percent: float
    bytes_written: int
    total_bytes: int


@dataclass(frozen=True)
class SplitResult:
    """
    Outcome of a completed split.
    """
    chunk_count: int
    total_bytes_written: int
    chunk_paths: tuple[Path, ...] = field(default_factory=tuple)


ProgressSink = Optional[Callable[[ProgressEvent], None]]
