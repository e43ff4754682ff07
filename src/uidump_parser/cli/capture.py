import logging
from pathlib import Path
from typing import Annotated

import typer
import uiautomator2 as u2

from uidump_parser.utils.logging import config_logger

logger = logging.getLogger(__name__)


def capture(
    device: str,
    name: str,
    screenshot: Annotated[
        bool, typer.Option(help="Also save a screenshot as NAME.png")
    ] = False,
    debug: bool = False,
) -> None:
    """Dump the current UI hierarchy of DEVICE to NAME.xml."""
    config_logger(debug)
    d = u2.connect(device)
    logger.debug(d.info)
    output = Path(f"{name}.xml")
    output.write_text(d.dump_hierarchy(pretty=True), encoding="utf-8")
    typer.echo(output.resolve())
    if screenshot:
        d.screenshot(filename=f"{name}.png")


def main() -> None:
    typer.run(capture)
