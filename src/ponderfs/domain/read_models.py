from __future__ import annotations

"""
File Read Data Models.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FileReadResult:
    """
    Outcome of a successful text read.

    Attributes:
        content: Decoded file text.
        size_bytes: Size of the file in bytes.
        truncated: Reserved for partial reads. Oversized files are rejected
            outright, so this is always False.
    """
    content: str
    size_bytes: int
    truncated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
