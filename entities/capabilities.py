"""Capability contracts an item must expose to be filtered or related."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class Colour(str, Enum):
    """Colours a filterable item can carry."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    """Sizes a filterable item can carry."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


@runtime_checkable
class HasColour(Protocol):
    def get_colour(self) -> Colour: ...


@runtime_checkable
class HasSize(Protocol):
    def get_size(self) -> Size: ...


@runtime_checkable
class Filterable(HasColour, HasSize, Protocol):
    """Anything exposing both a colour and a size."""


@runtime_checkable
class HasName(Protocol):
    """Anything exposing a display name usable as a relation participant."""

    def get_name(self) -> str: ...
