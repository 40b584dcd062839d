"""Relation store errors."""

from __future__ import annotations

from typing import Any

from relations.relationship import Relationship


class RelationError(Exception):
    """Base class for relation store failures."""


class RelationNotFoundError(RelationError, LookupError):
    """Raised by single-result lookups when no matching fact exists."""

    def __init__(self, entity: Any, kind: Relationship) -> None:
        super().__init__(entity, kind)
        self.entity = entity
        self.kind = kind

    def __str__(self) -> str:
        name = self.entity.get_name() if hasattr(self.entity, "get_name") else repr(self.entity)
        return f"No {self.kind.value} relation recorded for {name}."


class InvalidRelationError(RelationError, ValueError):
    """Raised in strict mode when an insertion would record a rejected fact."""
