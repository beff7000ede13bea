"""A relation between two object types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Relation:
    """An undirected relation between two object types."""

    object_type_a: str
    object_type_b: str

    def contains_object(self, object_type: str) -> bool:
        """Return whether ``object_type`` is one of the two related types."""
        return object_type in (self.object_type_a, self.object_type_b)

    def other_type(self, first_type: str) -> str:
        """Return the type at the other end, or an empty string if not related."""
        if first_type == self.object_type_a:
            return self.object_type_b
        if first_type == self.object_type_b:
            return self.object_type_a
        return ""