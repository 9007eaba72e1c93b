"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

from common.constants import DEFAULT_CHUNK_SIZE, DEFAULT_PREFIX

STYLE = Style.from_dict(
    {
        "question": "#F45935 bold",
    }
)

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"

CONFIG_ENV_VAR = "BINSPLIT_CONFIG"
CONFIG_DIR_NAME = ".binsplit"
CONFIG_FILE_NAME = "config.json"

USAGE = "usage: binsplit INPUT [-o DIR] [-s SIZE] [-p PREFIX] [-y] [-q] [--json] [--debug]"

HELP_TEXT = f"""{USAGE}

Split a binary file into numbered fixed-size chunk files.

Arguments:
  INPUT                     File to split

Options:
  -o, --output-dir DIR      Directory for chunk files (default: <input dir>/<input name>_chunks)
  -s, --chunk-size SIZE     Chunk size: <number>[B|KB|MB|GB] (default: {DEFAULT_CHUNK_SIZE})
  -p, --prefix PREFIX       Chunk file name prefix, letters/digits/_/- only (default: {DEFAULT_PREFIX})
  -y, --overwrite           Replace existing chunk files without asking
  -q, --quiet               Only print a one-line summary at the end
      --json                Print the summary as JSON
      --debug               Enable debug logging on stderr
  -h, --help                Show this help

Chunks are written as {DEFAULT_PREFIX}0000.bin, {DEFAULT_PREFIX}0001.bin, ...
Concatenating them in order reproduces the input file.
Examples:
  binsplit backup.img
  binsplit backup.img -s 512KB -o parts/
  binsplit video.mp4 --chunk-size 1.5GB --prefix part_ --overwrite"""
