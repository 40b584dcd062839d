"""Filter search tests."""

from __future__ import annotations

from collections.abc import Iterator

from entities.capabilities import Colour, Size
from entities.types import Product
from filtering.filter import Filter
from filtering.specification import (
    AndSpecification,
    ColourSpecification,
    PredicateSpecification,
    SizeSpecification,
)


def build_catalogue() -> list[Product]:
    return [
        Product(name=f"{size.value}-{colour.value}", colour=colour, size=size)
        for size in Size
        for colour in Colour
    ]


def test_colour_search_returns_matching_subset_in_order() -> None:
    items = build_catalogue()
    matches = list(Filter().search(items, ColourSpecification(Colour.RED)))

    assert matches == [item for item in items if item.colour is Colour.RED]
    assert [item.name for item in matches] == [
        "small-red",
        "medium-red",
        "large-red",
        "huge-red",
    ]


def test_and_search_equals_intersection_regardless_of_operand_order() -> None:
    items = build_catalogue()
    product_filter = Filter()
    colour = ColourSpecification(Colour.BLUE)
    size = SizeSpecification(Size.HUGE)

    colour_hits = list(product_filter.search(items, colour))
    size_hits = list(product_filter.search(items, size))
    intersection = [item for item in colour_hits if item in size_hits]

    assert list(product_filter.search(items, AndSpecification(colour, size))) == intersection
    assert list(product_filter.search(items, AndSpecification(size, colour))) == intersection
    assert [item.name for item in intersection] == ["huge-blue"]


def test_search_is_idempotent_over_unchanged_items() -> None:
    items = build_catalogue()
    spec = SizeSpecification(Size.MEDIUM)
    product_filter = Filter()

    assert list(product_filter.search(items, spec)) == list(product_filter.search(items, spec))


def test_search_is_lazy() -> None:
    consumed: list[str] = []

    def source() -> Iterator[Product]:
        for item in build_catalogue():
            consumed.append(item.name)
            yield item

    results = Filter().search(source(), ColourSpecification(Colour.RED))
    assert consumed == []

    first = next(results)
    assert first.name == "small-red"
    assert consumed == ["small-red"]


def test_empty_input_and_no_matches_yield_nothing() -> None:
    product_filter = Filter()
    never = PredicateSpecification(lambda item: False, "never")

    assert list(product_filter.search([], ColourSpecification(Colour.RED))) == []
    assert list(product_filter.search(build_catalogue(), never)) == []
    assert product_filter.count(build_catalogue(), never) == 0


def test_new_dimension_needs_only_a_new_specification() -> None:
    items = build_catalogue()
    named_large = PredicateSpecification(lambda item: item.name.startswith("large"), "large names")
    spec = named_large & ColourSpecification(Colour.GREEN)

    assert [item.name for item in Filter().search(items, spec)] == ["large-green"]
    assert Filter().count(items, named_large) == 3
