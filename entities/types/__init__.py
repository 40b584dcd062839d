"""Concrete entity models."""

from entities.types.dom import DomElement
from entities.types.person import Person
from entities.types.product import Product

__all__ = [
    "DomElement",
    "Person",
    "Product",
]
