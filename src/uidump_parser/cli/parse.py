import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from uidump_parser.common.attribute_filter import AttributeFilter
from uidump_parser.common.query import Query
from uidump_parser.search.traversal import search
from uidump_parser.utils.document import DocumentError, load_document
from uidump_parser.utils.logging import config_logger

logger = logging.getLogger(__name__)

EXAMPLES = """Examples:

uidump-parser --file dump.xml --resource-id com.example --print-only bounds --debug

uidump-parser --file dump.xml --resource-id com.example --filter-attribute text=Grindr --print-only bounds

uidump-parser --file dump.xml --class android.widget.TextView --filter-attribute enabled=true

uidump-parser --file dump.xml --text Instagram --filter-attribute package=com.example --bounds
"""

NO_CRITERIA = (
    "No search criteria specified. "
    "Use --resource-id, --class, --text, or --filter-attribute <attr=value>."
)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(epilog=EXAMPLES)
def parse(
    file: Annotated[
        Path,
        typer.Option(
            "--file", "-f", dir_okay=False, help="Path to the XML file to parse"
        ),
    ],
    resource_id: Annotated[
        Optional[str],
        typer.Option(
            "--resource-id", "-r", help="Search for a node with the given resource-id"
        ),
    ] = None,
    class_name: Annotated[
        Optional[str],
        typer.Option(
            "--class", "-c", help="Search for a node with the given class name"
        ),
    ] = None,
    text: Annotated[
        Optional[str],
        typer.Option(
            "--text", "-t", help="Search for a node with the given text value"
        ),
    ] = None,
    filter_attribute: Annotated[
        Optional[str],
        typer.Option(
            "--filter-attribute",
            "-F",
            metavar="ATTR=VAL",
            help="Filter by any attribute dynamically (e.g., package, content-desc)",
        ),
    ] = None,
    print_only: Annotated[
        Optional[str],
        typer.Option(
            "--print-only",
            "-p",
            metavar="ATTRIBUTE",
            help="Print only the specified attribute for matched nodes",
        ),
    ] = None,
    bounds: Annotated[
        bool,
        typer.Option("--bounds", "-b", help="Print bounds for matched nodes"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Enable debug mode for verbose output"),
    ] = False,
) -> None:
    """Search an Android UI hierarchy dump for matching nodes."""
    config_logger(debug)

    if bounds and not print_only:
        print_only = "bounds"

    try:
        root = load_document(file)
    except DocumentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    query = Query.from_options(
        resource_id,
        class_name,
        text,
        AttributeFilter.parse(filter_attribute),
        print_only,
    )
    if query is None:
        typer.echo(NO_CRITERIA, err=True)
        return

    for block in search(root, query):
        typer.echo(block)


def main() -> None:
    app()
