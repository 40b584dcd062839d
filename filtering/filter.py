"""Lazy search over a sequence of items."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from filtering.specification import Specification

T = TypeVar("T")

logger = logging.getLogger("factstore.filter")


class BaseFilter(ABC, Generic[T]):
    """Abstract filter contract."""

    @abstractmethod
    def search(self, items: Iterable[T], specification: Specification[T]) -> Iterator[T]:
        """Yield the items that satisfy ``specification``."""


class Filter(BaseFilter[T]):
    """Yields matching items in their original order without materializing them."""

    def search(self, items: Iterable[T], specification: Specification[T]) -> Iterator[T]:
        logger.debug("search started: %r", specification)
        for item in items:
            if specification.is_satisfied(item):
                yield item

    def count(self, items: Iterable[T], specification: Specification[T]) -> int:
        """Return how many items match."""
        return sum(1 for _ in self.search(items, specification))
