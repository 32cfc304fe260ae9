from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration overrides,
dispatch to the tree listing or file read operation, and result rendering
as text or JSON. Workspace failures are reported with their kind and a
distinct exit code.
"""

import json
import os
import sys
from typing import Any, List, Optional

from ponderfs.core.analysis.tree_builder import build_tree
from ponderfs.core.analysis.tree_filter import filter_tree
from ponderfs.core.analysis.tree_renderer import render_tree
from ponderfs.core.services.file_reader import read_text_file
from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig
from ponderfs.domain.errors import WorkspaceError
from ponderfs.domain.tree_models import TreeNode
from ponderfs.infra.fs import normalize_path
from ponderfs.infra.logging import LoggingConfig, configure_logging, get_logger
from ponderfs.interface.cli import args as cli_args
from ponderfs.utils.formatting import format_file_size, language_for_path
from ponderfs.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_WORKSPACE_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    json_output = bool(getattr(args, "json_output", False))

    # 3. Resolve limits
    try:
        config = DEFAULT_CONFIG.with_overrides(**cli_args.args_to_overrides(args))
        max_bytes = cli_args.read_limit(args)
    except ValueError as e:
        return _report_invalid_option(e, json_output)

    root = normalize_path(args.root, fallback=os.getcwd())
    logger.debug(f"Command '{args.command}' targeting workspace: {root}")

    # 4. Dispatch
    try:
        if args.command == "tree":
            return _run_tree(
                root,
                config,
                json_output,
                show_sizes=not args.no_sizes,
                name_filter=args.name_filter,
            )
        return _run_read(root, args.rel_path, max_bytes, config, json_output)
    except WorkspaceError as e:
        if json_output:
            _print_json({"ok": False, "error": e.to_dict()})
        else:
            print(f"ERROR: {i18n.t('cli.errors.workspace', message=str(e))}", file=sys.stderr)
        return EXIT_WORKSPACE_ERROR
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_tree(
        root: str,
        config: InspectorConfig,
        json_output: bool,
        show_sizes: bool,
        name_filter: Optional[str] = None,
) -> int:
    tree = build_tree(root, config)
    if name_filter:
        tree = filter_tree(tree, name_filter)

    if json_output:
        _print_json(tree.to_dict())
        return EXIT_OK

    for line in render_tree(tree, show_sizes=show_sizes):
        print(line)
    print()
    print(_summarize(tree))
    return EXIT_OK


def _run_read(
        root: str,
        rel_path: str,
        max_bytes: Optional[int],
        config: InspectorConfig,
        json_output: bool,
) -> int:
    result = read_text_file(root, rel_path, max_bytes=max_bytes, config=config)

    if json_output:
        _print_json(result.to_dict())
        return EXIT_OK

    header = i18n.t(
        "cli.status.read_header",
        path=rel_path,
        size=format_file_size(result.size_bytes),
        language=language_for_path(rel_path),
    )
    print(header, file=sys.stderr)
    sys.stdout.write(result.content)
    if result.content and not result.content.endswith("\n"):
        sys.stdout.write("\n")
    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _summarize(tree: TreeNode) -> str:
    dirs = files = 0
    for node in tree.iter_nodes():
        if node is tree:
            continue
        if node.is_dir:
            dirs += 1
        else:
            files += 1
    return i18n.t("cli.status.summary", dirs=dirs, files=files)


def _report_invalid_option(error: ValueError, json_output: bool) -> int:
    if json_output:
        _print_json({"ok": False, "error": {"kind": "invalid_option", "message": str(error)}})
    else:
        print(f"ERROR: {i18n.t('cli.errors.invalid_option', error=str(error))}", file=sys.stderr)
    return EXIT_WORKSPACE_ERROR


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
