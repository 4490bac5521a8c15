from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Code:
    """The source text of one snippet, as cut out of a document."""
    source: str

    def __str__(self) -> str:
        return self.source


def source_of(code: Code | str) -> str:
    if isinstance(code, Code):
        return code.source
    return code
