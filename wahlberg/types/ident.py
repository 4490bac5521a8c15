from __future__ import annotations
import sys


class Ident:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Ident) -> bool:
        return isinstance(other, Ident) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Ident({self.id!r})"

    def __str__(self):
        return self.id
