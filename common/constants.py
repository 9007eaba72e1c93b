"""Project-wide constants (e.g., default chunk size, naming rules)."""

DEFAULT_CHUNK_SIZE: str = "1MB"
DEFAULT_PREFIX: str = "chunk_"

CHUNK_EXTENSION: str = ".bin"
CHUNK_INDEX_WIDTH: int = 4  # zero padding only, wider indices are kept as-is

OUTPUT_DIR_SUFFIX: str = "_chunks"

PREFIX_PATTERN: str = r"^[A-Za-z0-9_-]+$"

SIZE_UNIT_SCALES: dict[str, int] = {
    "": 1,
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
}
