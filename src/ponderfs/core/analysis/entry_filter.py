from __future__ import annotations

"""
Walk Entry Filtering Engine.

Decides, per directory entry met during a workspace walk, whether the entry
is skipped (and for directories, its whole subtree pruned). Symlink rules
keep the walk inside the workspace and free of cycles; name rules drop
dependency, build and metadata noise that would otherwise exhaust the node
budget.
"""

import os

from ponderfs.core.security.path_guard import link_target_is_contained
from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def should_ignore(
        entry: os.DirEntry,
        canonical_root: str,
        config: InspectorConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Evaluate the ignore rules for a single walk entry.

    Rules, first match wins:
    1. Symlinks to directories are never followed.
    2. Other symlinks are kept only when their target resolves inside the root.
    3. Denylisted directory names are pruned.
    4. Denylisted file names are dropped.
    5. Dotted directories are pruned unless allowlisted.

    Args:
        entry: Entry produced by os.scandir.
        canonical_root: Canonical workspace root.
        config: Active filter lists.

    Returns:
        bool: True if the entry must be skipped.
    """
    try:
        if entry.is_symlink():
            if entry.is_dir():  # follows the link
                return True
            return not link_target_is_contained(entry.path, canonical_root)

        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError:
        return True

    name = entry.name

    if is_dir and name in config.ignored_dirs:
        return True

    if not is_dir and name in config.ignored_files:
        return True

    if is_dir and name.startswith("."):
        return name not in config.allowed_hidden_dirs

    return False
