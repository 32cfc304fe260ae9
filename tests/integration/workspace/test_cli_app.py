from __future__ import annotations

"""
Integration tests for the CLI application controller (in-process).

Runs the controller against real workspaces and checks exit codes and
rendered output for both text and JSON modes.
"""

import json
import os
import sys
from pathlib import Path

import pytest

from ponderfs.infra.logging import shutdown_logging
from ponderfs.interface.cli import app as cli_app
from ponderfs.interface.cli.app import EXIT_FAILURE, EXIT_OK, EXIT_WORKSPACE_ERROR, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


def test_tree_json_output(workspace: Path, capsys) -> None:
    code = main(["tree", str(workspace), "--json"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    payload = json.loads(out)
    assert payload["node_type"] == "dir"
    assert payload["path"] == ""
    assert payload["children"] == [
        {
            "name": "src",
            "path": "src",
            "node_type": "dir",
            "children": [
                {"name": "main.txt", "path": "src/main.txt", "node_type": "file", "size_bytes": 10}
            ],
        }
    ]


def test_tree_text_output(workspace: Path, capsys) -> None:
    code = main(["tree", str(workspace)])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "ws/" in out
    assert "└── src/" in out
    assert "    └── main.txt (10 B)" in out
    assert ".git" not in out
    assert "1 directories, 1 files" in out


def test_tree_max_nodes_override(workspace: Path, capsys) -> None:
    code = main(["tree", str(workspace), "--json", "--max-nodes", "1"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_OK
    assert payload["children"] == [
        {"name": "src", "path": "src", "node_type": "dir", "children": []}
    ]


def test_tree_invalid_limit_is_reported(workspace: Path, capsys) -> None:
    code = main(["tree", str(workspace), "--max-depth", "0"])

    assert code == EXIT_WORKSPACE_ERROR
    assert "Invalid option" in capsys.readouterr().err


def test_tree_missing_root(tmp_path: Path, capsys) -> None:
    code = main(["tree", str(tmp_path / "missing"), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_WORKSPACE_ERROR
    assert payload["ok"] is False
    assert payload["error"]["kind"] == "io"


def test_read_text_output(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "src/main.txt"])
    captured = capsys.readouterr()

    assert code == EXIT_OK
    assert captured.out == "0123456789\n"
    assert "src/main.txt (10 B, plaintext)" in captured.err


def test_read_json_output(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "src/main.txt", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_OK
    assert payload == {"content": "0123456789", "size_bytes": 10, "truncated": False}


def test_read_traversal_json_error(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "../outside.txt", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_WORKSPACE_ERROR
    assert payload["error"]["kind"] == "traversal"


def test_read_too_large_text_error(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "src/main.txt", "--max-bytes", "9"])

    assert code == EXIT_WORKSPACE_ERROR
    assert "File too large: 10 bytes (max: 9 bytes)" in capsys.readouterr().err


def test_read_rejection_is_reported_once(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "src/main.txt", "--max-bytes", "9"])
    shutdown_logging()

    assert code == EXIT_WORKSPACE_ERROR
    assert capsys.readouterr().err.count("File too large") == 1


def test_read_negative_max_bytes_is_invalid_option(workspace: Path, capsys) -> None:
    code = main(["read", str(workspace), "src/main.txt", "--max-bytes", "-1", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_WORKSPACE_ERROR
    assert payload["error"]["kind"] == "invalid_option"


def test_runtime_value_error_is_unexpected_failure(workspace: Path, capsys, monkeypatch) -> None:
    def broken_build(root, config):
        raise UnicodeEncodeError("utf-8", "\udcff", 0, 1, "surrogates not allowed")

    monkeypatch.setattr(cli_app, "build_tree", broken_build)

    code = main(["tree", str(workspace), "--json"])
    captured = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert "invalid_option" not in captured.out
    assert "Unexpected failure" in captured.err


def test_tree_filter_keeps_matching_branches(workspace: Path, capsys) -> None:
    (workspace / "docs").mkdir()
    (workspace / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")

    code = main(["tree", str(workspace), "--json", "--filter", "MAIN"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_OK
    assert [child["name"] for child in payload["children"]] == ["src"]
    assert payload["children"][0]["children"][0]["path"] == "src/main.txt"


def test_tree_filter_text_summary_counts_visible_entries(workspace: Path, capsys) -> None:
    (workspace / "notes.txt").write_text("n\n", encoding="utf-8")

    code = main(["tree", str(workspace), "--filter", "notes"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "└── notes.txt" in out
    assert "src" not in out
    assert "0 directories, 1 files" in out


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="Needs byte-oriented file names.")
def test_tree_json_with_undecodable_name(workspace: Path, capsysbinary) -> None:
    try:
        with open(os.path.join(os.fsencode(str(workspace)), b"bad\xff.txt"), "wb") as f:
            f.write(b"x")
    except OSError as e:
        pytest.skip(f"Filesystem rejects non-UTF-8 names: {e}")

    code = main(["tree", str(workspace), "--json"])
    payload = json.loads(capsysbinary.readouterr().out.decode("utf-8"))

    assert code == EXIT_OK
    assert "bad\ufffd.txt" in [child["name"] for child in payload["children"]]
