"""
Command-line interface for drafttree.
"""

import logging
import os
import sys
from collections import Counter

import click
from rich.console import Console
from rich.table import Table

from drafttree.converter import DraftConverter
from drafttree.diagnostics import ConversionResult
from drafttree.exceptions import DraftTreeError
from drafttree.serialization import dump_tree, dumps_tree, load_draft
from drafttree.utils import configure_logging

console = Console(stderr=True)


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    drafttree - Convert Draft.js raw content into editor document trees.
    """
    pass


@cli.command(name="convert")
@click.argument('input_json', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output', '-o',
    help='Output JSON file (defaults to stdout)',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--indent',
    default=2,
    help='Indentation of the JSON output',
    type=int
)
@click.option(
    '--strict',
    is_flag=True,
    help='Exit with status 1 when anything could not be mapped'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def convert(input_json, output, indent, strict, verbose):
    """
    Convert a Draft.js JSON file into a document tree.

    Examples:

        drafttree convert content.json

        drafttree convert content.json -o doc.json --strict
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        content = load_draft(input_json)
        result = DraftConverter().convert(content)
    except (DraftTreeError, ValueError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    if output:
        dump_tree(result.doc, output, indent=indent)
        console.print(f"[bold green]✓ Converted {result.block_count} blocks:[/bold green] {os.path.abspath(output)}")
    else:
        click.echo(dumps_tree(result.doc, indent=indent))

    if not result.unmatched.empty:
        console.print(_unmatched_table(result))
        if strict:
            console.print("[bold red]✗ Unmatched content found (strict mode)[/bold red]")
            sys.exit(1)


@cli.command(name="inspect")
@click.argument('input_json', type=click.Path(exists=True, dir_okay=False))
def inspect_content(input_json):
    """
    Show block statistics and mapping diagnostics for a Draft.js JSON file.

    Example:

        drafttree inspect content.json
    """
    try:
        content = load_draft(input_json)
        result = DraftConverter().convert(content)
    except (DraftTreeError, ValueError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title=f"Draft.js content: {os.path.basename(input_json)}")
    table.add_column("Block type", style="cyan", no_wrap=True)
    table.add_column("Count", style="green", justify="right")
    for block_type, count in sorted(Counter(block.type for block in content.blocks).items()):
        table.add_row(block_type, str(count))
    table.add_row("[bold]Total[/bold]", str(len(content.blocks)))
    table.add_row("Entities", str(len(content.entity_map)))
    table.add_row("Top-level nodes", str(len(result.doc.children)))

    console.print()
    console.print(table)
    if result.unmatched.empty:
        console.print("[bold green]✓ Everything was mapped[/bold green]")
    else:
        console.print(_unmatched_table(result))
    console.print()


def _unmatched_table(result: ConversionResult) -> Table:
    table = Table(title="Unmatched content")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Detail", style="yellow")

    for block in result.unmatched.blocks:
        preview = block.text if len(block.text) <= 40 else block.text[:37] + "..."
        table.add_row("block", f"{block.type} {preview!r}")
    for key, entity in result.unmatched.entities.items():
        table.add_row("entity", f"{key}: {entity.type if entity is not None else '<missing>'}")
    for style_range in result.unmatched.inline_styles:
        table.add_row("style", f"{style_range.style} @{style_range.offset}+{style_range.length}")
    return table


if __name__ == "__main__":  # pragma: no cover
    cli()
