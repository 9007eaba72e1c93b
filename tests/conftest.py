"""Shared pytest fixtures for all tests."""

import os

import pytest
from cli.config import Config
from splitter.chunk_storage import get_chunk_path


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .binsplit directory
    """
    config_dir = tmp_path / '.binsplit'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir, monkeypatch):
    """
    Create temporary config instance with environment defaults cleared.

    Returns:
        Config instance with temp config file
    """
    monkeypatch.delenv('BINSPLIT_CHUNK_SIZE', raising=False)
    monkeypatch.delenv('BINSPLIT_PREFIX', raising=False)
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def make_input_file(tmp_path):
    """
    Factory creating an input file of deterministic pseudo-random bytes.

    Returns:
        Callable (size, name='input.bin') -> Path
    """
    def _make(size: int, name: str = 'input.bin'):
        file_path = tmp_path / name
        file_path.write_bytes(bytes((i * 31 + 7) % 251 for i in range(size)))
        return file_path

    return _make


@pytest.fixture
def random_input_file(tmp_path):
    """
    Create a 10000-byte input file with random content.

    Returns:
        Path to the input file
    """
    file_path = tmp_path / 'random.bin'
    file_path.write_bytes(os.urandom(10000))
    return file_path


@pytest.fixture
def read_chunks():
    """
    Concatenate chunk files in index order, stopping at the first gap.

    Returns:
        Callable (output_dir, prefix='chunk_') -> bytes
    """
    def _read(output_dir, prefix='chunk_'):
        data = b''
        index = 0
        while True:
            path = get_chunk_path(output_dir, prefix, index)
            if not path.exists():
                return data
            data += path.read_bytes()
            index += 1

    return _read
