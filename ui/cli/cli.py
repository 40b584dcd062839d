"""CLI entrypoint for factstore."""

from __future__ import annotations

import typer

from entities.capabilities import Colour, Size
from ui.cli import commands

app = typer.Typer(help="Composable filters and relation facts")
products_app = typer.Typer(help="Product filtering commands")
relations_app = typer.Typer(help="Relation store commands")
config_app = typer.Typer(help="Configuration commands")


@products_app.command("filter")
def products_filter_cmd(
    colour: Colour | None = typer.Option(None, "--colour", help="Keep only this colour"),
    size: Size | None = typer.Option(None, "--size", help="Keep only this size"),
) -> None:
    """Filter the demo catalogue."""
    commands.products_filter(colour=colour, size=size)


@relations_app.command("demo")
def relations_demo_cmd(
    show_facts: bool = typer.Option(False, "--show-facts", help="Print each fact as it is recorded"),
) -> None:
    """Run the family and DOM relation scenarios."""
    commands.relations_demo(show_facts=show_facts)


@relations_app.command("spouse")
def relations_spouse_cmd(
    name: str = typer.Argument(..., help="Family member name (Amy, Barbara, Daniel)"),
) -> None:
    """Look up the spouse of a demo family member."""
    commands.relations_spouse(name=name)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(products_app, name="products")
app.add_typer(relations_app, name="relations")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
