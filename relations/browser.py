"""Read-only query contract over relation facts.

Callers that only hold a ``RelationshipBrowser`` cannot mutate the store and
must not assume anything about how facts are kept.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

N = TypeVar("N")


class RelationshipBrowser(ABC, Generic[N]):
    """Abstract relation query interface."""

    @abstractmethod
    def find_all_children_of(self, parent: N) -> Iterator[N]:
        """Yield every recorded child of ``parent``."""

    @abstractmethod
    def find_all_parents_of(self, child: N) -> Iterator[N]:
        """Yield every recorded parent of ``child``."""

    @abstractmethod
    def find_all_siblings_of(self, sibling: N) -> Iterator[N]:
        """Yield every recorded sibling of ``sibling``."""

    @abstractmethod
    def find_spouse_of(self, spouse: N) -> N:
        """Return the spouse of ``spouse`` or raise ``RelationNotFoundError``."""
