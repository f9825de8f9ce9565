"""CLI command: cssbuilder json -- print JSON in compact form."""

from __future__ import annotations

import json
import sys

import click

from cssbuilder.objects import to_text


@click.command("json")
@click.argument("text")
def json_command(text: str) -> None:
    """Re-serialise TEXT as compact JSON."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON: {exc}", err=True)
        sys.exit(1)
    click.echo(to_text(value))
