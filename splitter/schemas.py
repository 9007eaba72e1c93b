"""Pydantic schemas for split summaries."""

from typing import List
from pydantic import BaseModel


class SplitSummary(BaseModel):
    """Summary of a split run, as printed by --json."""
    input_path: str
    output_dir: str
    chunk_size: int
    chunk_count: int
    total_bytes: int
    cancelled: bool = False
    chunk_files: List[str] = []
