"""Product models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from entities.capabilities import Colour, Size


class Product(BaseModel):
    """Catalogue item filterable by colour and size."""

    model_config = ConfigDict(frozen=True)

    name: str
    colour: Colour
    size: Size

    def get_colour(self) -> Colour:
        return self.colour

    def get_size(self) -> Size:
        return self.size
