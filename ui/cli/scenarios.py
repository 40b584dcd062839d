"""Demo data shared by the CLI commands."""

from __future__ import annotations

from entities.capabilities import Colour, HasName, Size
from entities.types import DomElement, Person, Product
from relations.store import RelationshipStore


def build_catalogue() -> list[Product]:
    """One product per colour and size combination, ordered by size."""
    return [
        Product(name=f"{size.value.title()} {colour.value} product", colour=colour, size=size)
        for size in Size
        for colour in Colour
    ]


def populate_family(store: RelationshipStore[HasName]) -> dict[str, Person]:
    amy = Person(name="Amy")
    barbara = Person(name="Barbara")
    daniel = Person(name="Daniel")
    store.add_parent_and_child(barbara, amy)
    store.add_parent_and_child(daniel, amy)
    store.add_spouse(barbara, daniel)
    return {"amy": amy, "barbara": barbara, "daniel": daniel}


def populate_dom(store: RelationshipStore[HasName]) -> dict[str, DomElement]:
    html = DomElement(name="HTML")
    head = DomElement(name="HEAD")
    title = DomElement(name="TITLE")
    body = DomElement(name="BODY")
    store.add_parent_and_child(html, head)
    store.add_parent_and_child(head, title)
    store.add_parent_and_child(html, body)
    store.add_sibling(head, body)
    return {"html": html, "head": head, "title": title, "body": body}
