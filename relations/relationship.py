"""Relation kinds and fact triples."""

from __future__ import annotations

from enum import Enum
from typing import Generic, NamedTuple, TypeVar

N = TypeVar("N")


class Relationship(str, Enum):
    """Closed set of relation kinds."""

    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    SPOUSE = "spouse"

    @property
    def inverse(self) -> Relationship:
        """Kind recorded on the reverse edge."""
        return _INVERSES[self]

    @property
    def is_symmetric(self) -> bool:
        return self.inverse is self


_INVERSES = {
    Relationship.PARENT: Relationship.CHILD,
    Relationship.CHILD: Relationship.PARENT,
    Relationship.SIBLING: Relationship.SIBLING,
    Relationship.SPOUSE: Relationship.SPOUSE,
}


class RelationTriple(NamedTuple, Generic[N]):
    """One directed fact ``source --kind--> target``."""

    source: N
    kind: Relationship
    target: N
