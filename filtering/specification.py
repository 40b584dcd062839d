"""Composable predicates over single items.

A specification answers one question, ``is_satisfied(item)``, and must give
the same answer for the same unmutated item. Specifications combine with
``&`` (and), ``|`` (or) and ``~`` (not), so a new filter dimension only needs
a new leaf specification; neither the composites nor ``Filter`` change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from entities.capabilities import Colour, HasColour, HasSize, Size

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Predicate over one item."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return True when ``item`` meets this specification."""

    def __and__(self, other: Specification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: Specification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)


def _require_specification(value: object, role: str) -> None:
    if not isinstance(value, Specification):
        raise TypeError(f"{role} must be a Specification, got {type(value).__name__}")


class ColourSpecification(Specification[HasColour]):
    """Matches items of one colour."""

    def __init__(self, colour: Colour) -> None:
        self.colour = Colour(colour)

    def is_satisfied(self, item: HasColour) -> bool:
        return item.get_colour() == self.colour

    def __repr__(self) -> str:
        return f"colour == {self.colour.value}"


class SizeSpecification(Specification[HasSize]):
    """Matches items of one size."""

    def __init__(self, size: Size) -> None:
        self.size = Size(size)

    def is_satisfied(self, item: HasSize) -> bool:
        return item.get_size() == self.size

    def __repr__(self) -> str:
        return f"size == {self.size.value}"


class PredicateSpecification(Specification[T]):
    """Adapts a plain callable, e.g. ``lambda item: item.weight > 10``."""

    def __init__(self, predicate: Callable[[T], bool], description: str = "predicate") -> None:
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        self.predicate = predicate
        self.description = description

    def is_satisfied(self, item: T) -> bool:
        return bool(self.predicate(item))

    def __repr__(self) -> str:
        return self.description


class AndSpecification(Specification[T]):
    """Satisfied when both children are; ``first`` is evaluated first."""

    def __init__(self, first: Specification[T], second: Specification[T]) -> None:
        _require_specification(first, "first")
        _require_specification(second, "second")
        self.first = first
        self.second = second

    @classmethod
    def of(cls, *specifications: Specification[T]) -> Specification[T]:
        """Fold specifications left to right into nested ANDs."""
        if not specifications:
            raise ValueError("AndSpecification.of needs at least one specification")
        combined = specifications[0]
        _require_specification(combined, "first")
        for spec in specifications[1:]:
            combined = cls(combined, spec)
        return combined

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"({self.first!r} & {self.second!r})"


class OrSpecification(Specification[T]):
    """Satisfied when either child is; ``first`` is evaluated first."""

    def __init__(self, first: Specification[T], second: Specification[T]) -> None:
        _require_specification(first, "first")
        _require_specification(second, "second")
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) or self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"({self.first!r} | {self.second!r})"


class NotSpecification(Specification[T]):
    """Negates a child specification."""

    def __init__(self, inner: Specification[T]) -> None:
        _require_specification(inner, "inner")
        self.inner = inner

    def is_satisfied(self, item: T) -> bool:
        return not self.inner.is_satisfied(item)

    def __repr__(self) -> str:
        return f"~{self.inner!r}"
