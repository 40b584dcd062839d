"""DOM element models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomElement(BaseModel):
    """Document node related to other nodes by nesting."""

    model_config = ConfigDict(frozen=True)

    name: str

    def get_name(self) -> str:
        return f"Dom Element {self.name}"
