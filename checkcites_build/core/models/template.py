"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A distribution file produced by a generator.

    Attributes:
        path:       File name the generator suggests (the caller decides
                    the final location).
        content:    Full file content, ending in exactly one newline.
        executable: Whether the written file should carry exec bits.
        reason:     Why this file was generated.
    """

    path: str
    content: str
    executable: bool = False
    reason: str = ""
