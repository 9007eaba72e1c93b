"""Tests for command-line argument parsing."""

import pytest

from cli.models import HelpCommand, SplitCommand
from cli.parser import ParseError, parse_command, validate_prefix


def test_input_only_uses_defaults():
    cmd = parse_command(["data.img"])

    assert cmd == SplitCommand(input_path="data.img")
    assert cmd.output_dir is None
    assert cmd.chunk_size is None
    assert cmd.prefix is None
    assert cmd.overwrite is False
    assert cmd.quiet is False


def test_all_short_options():
    cmd = parse_command(["data.img", "-o", "out", "-s", "512KB", "-p", "part-", "-y", "-q"])

    assert cmd == SplitCommand(
        input_path="data.img",
        output_dir="out",
        chunk_size="512KB",
        prefix="part-",
        overwrite=True,
        quiet=True,
    )


def test_long_options_with_equals():
    cmd = parse_command(["--chunk-size=2MB", "--output-dir=/tmp/x", "--prefix=p_", "data.img"])

    assert cmd.chunk_size == "2MB"
    assert cmd.output_dir == "/tmp/x"
    assert cmd.prefix == "p_"
    assert cmd.input_path == "data.img"


def test_json_and_debug_flags():
    cmd = parse_command(["data.img", "--json", "--debug", "--overwrite", "--quiet"])

    assert cmd.json_output is True
    assert cmd.debug is True
    assert cmd.overwrite is True
    assert cmd.quiet is True


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["data.img", "--help"]])
def test_help(argv):
    assert isinstance(parse_command(argv), HelpCommand)


def test_double_dash_allows_dash_file_names():
    cmd = parse_command(["-y", "--", "-weird-name.bin"])

    assert cmd.input_path == "-weird-name.bin"
    assert cmd.overwrite is True


def test_help_after_double_dash_is_a_file_name():
    cmd = parse_command(["--", "--help"])

    assert cmd == SplitCommand(input_path="--help")


def test_missing_input():
    with pytest.raises(ParseError, match="INPUT"):
        parse_command([])


def test_multiple_inputs():
    with pytest.raises(ParseError, match="exactly one"):
        parse_command(["a.bin", "b.bin"])


def test_unknown_option():
    with pytest.raises(ParseError, match="Unknown option"):
        parse_command(["a.bin", "--compress"])


def test_option_missing_value():
    with pytest.raises(ParseError, match="requires a value"):
        parse_command(["a.bin", "-s"])


def test_flag_with_value():
    with pytest.raises(ParseError, match="does not take a value"):
        parse_command(["a.bin", "--quiet=yes"])


def test_empty_output_dir():
    with pytest.raises(ParseError):
        parse_command(["a.bin", "-o", ""])


@pytest.mark.parametrize("prefix", ["bad prefix", "../up", "a/b", "x.y", "", "abc\n"])
def test_invalid_prefix(prefix):
    with pytest.raises(ParseError, match="Invalid prefix"):
        parse_command(["a.bin", "--prefix", prefix])


@pytest.mark.parametrize("prefix", ["chunk_", "part-", "ABC123", "_"])
def test_valid_prefix(prefix):
    validate_prefix(prefix)
