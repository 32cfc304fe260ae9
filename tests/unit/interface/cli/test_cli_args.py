from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Subcommand and positional argument capture.
2. Mapping of limit flags to configuration overrides.
3. Handling of boolean flags (store_true).
"""

import pytest

from ponderfs.interface.cli.args import args_to_overrides, build_parser, read_limit


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_tree_defaults_to_current_directory():
    args = parse_args(["tree"])

    assert args.command == "tree"
    assert args.root == "."
    assert args.json_output is False
    assert args.no_sizes is False
    assert args.name_filter is None
    assert args_to_overrides(args) == {}


def test_tree_limit_flags_become_overrides():
    args = parse_args(["tree", "/ws", "--max-depth", "4", "--max-nodes", "100", "--json"])

    assert args.root == "/ws"
    assert args.json_output is True
    assert args_to_overrides(args) == {"max_depth": 4, "max_nodes": 100}


def test_read_arguments():
    args = parse_args(["--debug", "read", "/ws", "src/main.txt", "--max-bytes", "64"])

    assert args.debug is True
    assert args.command == "read"
    assert args.root == "/ws"
    assert args.rel_path == "src/main.txt"
    assert args.max_bytes == 64
    assert read_limit(args) == 64
    assert args_to_overrides(args) == {}


def test_global_log_file_flag():
    args = parse_args(["--log-file", "/tmp/p.log", "tree"])

    assert args.log_file == "/tmp/p.log"


def test_command_is_required():
    with pytest.raises(SystemExit):
        parse_args([])


def test_read_requires_relative_path():
    with pytest.raises(SystemExit):
        parse_args(["read", "/ws"])


def test_tree_filter_flag():
    args = parse_args(["tree", "/ws", "--filter", "Readme"])

    assert args.name_filter == "Readme"
    assert args_to_overrides(args) == {}


def test_read_limit_is_optional():
    assert read_limit(parse_args(["read", "/ws", "a.txt"])) is None
    assert read_limit(parse_args(["tree"])) is None


def test_negative_read_limit_is_rejected():
    args = parse_args(["read", "/ws", "a.txt", "--max-bytes", "-5"])

    with pytest.raises(ValueError, match="non-negative"):
        read_limit(args)
