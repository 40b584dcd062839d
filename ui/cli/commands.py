"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging
from entities.capabilities import Colour, Size
from filtering.specification import ColourSpecification, SizeSpecification, Specification
from relations.errors import RelationNotFoundError
from relations.store import RELATION_ADDED
from ui.cli.scenarios import build_catalogue, populate_dom, populate_family


def _runtime(root: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=root).build()
    configure_logging(bundle.config)
    return bundle


def products_filter(colour: Colour | None = None, size: Size | None = None) -> None:
    """Filter the demo catalogue by colour, size or both."""
    bundle = _runtime()
    specs: list[Specification] = []
    if colour is not None:
        specs.append(ColourSpecification(colour))
    if size is not None:
        specs.append(SizeSpecification(size))
    if not specs:
        typer.echo("Pass --colour and/or --size.", err=True)
        raise typer.Exit(code=2)

    specification = specs[0] if len(specs) == 1 else specs[0] & specs[1]
    typer.echo(f"Filtered products by {specification!r}")
    for product in bundle.product_filter.search(build_catalogue(), specification):
        typer.echo(f"- {product.name} | colour={product.colour.value} | size={product.size.value}")


def relations_demo(show_facts: bool = False) -> None:
    """Print research sentences for the family and DOM scenarios."""
    bundle = _runtime()
    research = bundle.research
    if show_facts:
        bundle.event_bus.subscribe(RELATION_ADDED, _echo_fact)

    family = populate_family(bundle.store)
    lines = [
        *research.parents_of(family["amy"]),
        *research.siblings_of(family["amy"]),
        *research.children_of(family["barbara"]),
        *research.children_of(family["daniel"]),
        research.spouse_of(family["barbara"]),
        research.spouse_of(family["daniel"]),
    ]

    dom = populate_dom(bundle.store)
    lines.extend(research.parents_of(dom["body"]))
    lines.extend(research.siblings_of(dom["head"]))
    lines.extend(research.siblings_of(dom["body"]))
    lines.extend(research.children_of(dom["html"]))
    lines.extend(research.children_of(dom["head"]))

    for line in lines:
        typer.echo(line)
    typer.echo(f"Facts recorded: {len(bundle.store)}")


def _echo_fact(payload: dict[str, Any]) -> None:
    typer.echo(
        f"+ {payload['source'].get_name()} --{payload['kind'].value}--> "
        f"{payload['target'].get_name()}"
    )


def relations_spouse(name: str) -> None:
    """Look up a spouse in the demo family."""
    bundle = _runtime()
    family = populate_family(bundle.store)
    person = family.get(name.lower())
    if person is None:
        typer.echo(f"Unknown family member: {name}", err=True)
        raise typer.Exit(code=1)
    try:
        typer.echo(bundle.research.spouse_of(person))
    except RelationNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def config_show() -> None:
    """Show effective runtime config."""
    bundle = _runtime()
    typer.echo(json.dumps(bundle.config, indent=2))
