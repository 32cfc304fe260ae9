from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (subcommands, help messages,
argument types) and translates parsed namespaces into configuration
overrides.
"""

import argparse
from typing import Any, Dict, Optional

from ponderfs.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ponderfs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="ponderfs",
        description=i18n.t("app.description"),
    )

    # --- Diagnostics (global) ---
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Tree listing ---
    tree = sub.add_parser("tree", help=i18n.t("cli.args.tree"))
    tree.add_argument("root", nargs="?", default=".", help=i18n.t("cli.args.root"))
    tree.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_depth"),
    )
    tree.add_argument(
        "--max-nodes",
        dest="max_nodes",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_nodes"),
    )
    tree.add_argument("--no-sizes", action="store_true", help=i18n.t("cli.args.no_sizes"))
    tree.add_argument(
        "--filter",
        dest="name_filter",
        metavar="TEXT",
        default=None,
        help=i18n.t("cli.args.filter"),
    )
    tree.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))

    # --- File reading ---
    read = sub.add_parser("read", help=i18n.t("cli.args.read"))
    read.add_argument("root", help=i18n.t("cli.args.root"))
    read.add_argument("rel_path", help=i18n.t("cli.args.rel_path"))
    read.add_argument(
        "--max-bytes",
        dest="max_bytes",
        type=int,
        default=None,
        help=i18n.t("cli.args.max_bytes"),
    )
    read.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Extract configuration overrides from a parsed namespace.

    Only limits the user actually set are returned.

    Args:
        args: Parsed arguments.

    Returns:
        Dict[str, Any]: Keyword arguments for InspectorConfig.with_overrides.
    """
    overrides: Dict[str, Any] = {}
    for key in ("max_depth", "max_nodes"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    return overrides


def read_limit(args: argparse.Namespace) -> Optional[int]:
    """
    Return the --max-bytes value of a read command, or None when unset.

    Raises:
        ValueError: If the limit is negative.
    """
    value = getattr(args, "max_bytes", None)
    if value is not None and value < 0:
        raise ValueError(f"max_bytes must be non-negative, got {value}")
    return value
