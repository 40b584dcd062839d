"""Person models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Person(BaseModel):
    """A family member that can take part in relations."""

    model_config = ConfigDict(frozen=True)

    name: str

    def get_name(self) -> str:
        return self.name
