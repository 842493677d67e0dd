"""
Command-line interface for pdfobjx.
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pdfobjx.encoder import EncoderOptions, DEFAULT_MAX_DEPTH, encode, encode_name
from pdfobjx.exceptions import PDFObjXError
from pdfobjx.jsonvalue import loads
from pdfobjx.types import Name
from pdfobjx.utils import get_logger, to_hex

console = Console()


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    pdfobjx - Encode values as PDF object syntax.
    """
    pass


@cli.command(name="encode")
@click.argument('document', required=False, default='-', type=str)
@click.option(
    '--content-stream', '-c',
    is_flag=True,
    default=False,
    help='Write strings as raw bytes, as inside a content stream'
)
@click.option(
    '--max-depth',
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help='Maximum nesting of arrays and dictionaries',
    type=click.IntRange(min=1)
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    default=False,
    help='Enable debug logging'
)
def encode_document(document, content_stream, max_depth, verbose):
    """
    Encode a JSON DOCUMENT (or stdin) as a PDF object.

    Use {"$name": ...}, {"$ref": [id, gen]}, {"$date": ...} and
    {"$bytes": ...} for names, references, dates and binary strings.

    Examples:

        pdfobjx encode '{"Type": {"$name": "Page"}, "Parent": {"$ref": [2, 0]}}'

        echo '[1, 2.5, "text"]' | pdfobjx encode -c
    """
    if verbose:
        get_logger("pdfobjx").setLevel(logging.DEBUG)

    try:
        text = click.get_text_stream('stdin').read() if document == '-' else document
        options = EncoderOptions(max_depth=max_depth)
        value = loads(text, options=options)
        token = encode(value, content_stream, options=options)
    except json.JSONDecodeError as e:
        console.print(f"[bold red]✗ Error:[/bold red] Invalid JSON: {escape(str(e))}")
        sys.exit(1)
    except RecursionError:
        console.print("[bold red]✗ Error:[/bold red] Invalid JSON: document is nested too deeply")
        sys.exit(1)
    except PDFObjXError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(e.message)}")
        sys.exit(1)

    click.echo(token)


@cli.command(name="name")
@click.argument('text', type=str)
def show_name(text):
    """
    Show how TEXT is written as a PDF name.

    Example:

        pdfobjx name "Font Name"
    """
    name = Name(text)

    table = Table(title="PDF Name", show_header=False)
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Input", Text(text))
    table.add_row("Bytes", to_hex(name.raw))
    table.add_row("Token", Text(encode_name(name)))

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
