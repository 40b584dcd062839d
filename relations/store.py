"""In-memory relation fact store."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from core.event_bus import EventBus
from entities.capabilities import HasName
from relations.browser import RelationshipBrowser
from relations.errors import InvalidRelationError, RelationNotFoundError
from relations.relationship import RelationTriple, Relationship

NamedT = TypeVar("NamedT", bound=HasName)

RELATION_ADDED = "relation.added"

logger = logging.getLogger("factstore.relations")


class RelationshipStore(RelationshipBrowser[NamedT], Generic[NamedT]):
    """Append-only list of ``(source, kind, target)`` triples.

    Every insertion records the fact and its inverse, so each ``add_*`` call
    grows the store by exactly two triples. Permissive mode (the default)
    keeps duplicates, self-relations and repeated spouses. ``strict=True``
    rejects self-relations and a second spouse with ``InvalidRelationError``.

    Queries re-scan the triple list on each call and yield lazily. A scan
    covers only the triples present when iteration starts; facts added while
    a query generator is being consumed are not seen by it. Take
    ``list(...)`` first when a fixed snapshot is needed.
    """

    def __init__(self, *, strict: bool = False, event_bus: EventBus | None = None) -> None:
        self.strict = strict
        self.event_bus = event_bus
        self._relations: list[RelationTriple[NamedT]] = []

    def add_parent_and_child(self, parent: NamedT, child: NamedT) -> None:
        self._check_distinct(parent, child, Relationship.PARENT)
        self._add_pair(parent, Relationship.PARENT, child)

    def add_sibling(self, sibling: NamedT, other: NamedT) -> None:
        self._check_distinct(sibling, other, Relationship.SIBLING)
        self._add_pair(sibling, Relationship.SIBLING, other)

    def add_spouse(self, spouse: NamedT, other: NamedT) -> None:
        self._check_distinct(spouse, other, Relationship.SPOUSE)
        for party in (spouse, other):
            if self._has_relation(party, Relationship.SPOUSE):
                if self.strict:
                    raise InvalidRelationError(
                        f"{party.get_name()} already has a spouse recorded."
                    )
                logger.warning(
                    "Second spouse recorded for %s; find_spouse_of returns the first.",
                    party.get_name(),
                )
        self._add_pair(spouse, Relationship.SPOUSE, other)

    def find_all_children_of(self, parent: NamedT) -> Iterator[NamedT]:
        return self._targets(parent, Relationship.PARENT)

    def find_all_parents_of(self, child: NamedT) -> Iterator[NamedT]:
        return self._targets(child, Relationship.CHILD)

    def find_all_siblings_of(self, sibling: NamedT) -> Iterator[NamedT]:
        return self._targets(sibling, Relationship.SIBLING)

    def find_all_spouses_of(self, spouse: NamedT) -> Iterator[NamedT]:
        """Yield every recorded spouse, for callers checking for duplicates."""
        return self._targets(spouse, Relationship.SPOUSE)

    def find_spouse_of(self, spouse: NamedT) -> NamedT:
        """Return the target of the first spouse fact for ``spouse``."""
        for target in self._targets(spouse, Relationship.SPOUSE):
            return target
        raise RelationNotFoundError(spouse, Relationship.SPOUSE)

    def relations(self) -> list[RelationTriple[NamedT]]:
        """Snapshot of all triples in insertion order."""
        return list(self._relations)

    def __iter__(self) -> Iterator[RelationTriple[NamedT]]:
        return iter(self.relations())

    def __len__(self) -> int:
        return len(self._relations)

    def _targets(self, source: NamedT, kind: Relationship) -> Iterator[NamedT]:
        end = len(self._relations)
        for index in range(end):
            triple = self._relations[index]
            if triple.kind is kind and triple.source == source:
                yield triple.target

    def _has_relation(self, source: NamedT, kind: Relationship) -> bool:
        return any(True for _ in self._targets(source, kind))

    def _check_distinct(self, first: NamedT, second: NamedT, kind: Relationship) -> None:
        if self.strict and first == second:
            raise InvalidRelationError(
                f"{first.get_name()} cannot be its own {kind.value}."
            )

    def _add_pair(self, source: NamedT, kind: Relationship, target: NamedT) -> None:
        forward = RelationTriple(source, kind, target)
        backward = RelationTriple(target, kind.inverse, source)
        self._relations.append(forward)
        self._relations.append(backward)
        logger.debug(
            "Recorded %s: %s -> %s", kind.value, source.get_name(), target.get_name()
        )
        if self.event_bus is not None:
            for triple in (forward, backward):
                self.event_bus.emit(
                    RELATION_ADDED,
                    {"source": triple.source, "kind": triple.kind, "target": triple.target},
                )
