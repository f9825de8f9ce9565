"""CLI command: cssbuilder combine -- join two selectors with a combinator."""

from __future__ import annotations

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.selector import SelectorBuilder


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option(
    "--collapse-descendant",
    is_flag=True,
    help="Render a whitespace combinator as a single space.",
)
def combine(left: str, combinator: str, right: str, collapse_descendant: bool) -> None:
    """Join LEFT and RIGHT selector text with COMBINATOR (' ', '+', '~', '>')."""
    builder = SelectorBuilder(BuilderConfig(collapse_descendant=collapse_descendant))
    click.echo(builder.combine(left, combinator, right).stringify())
