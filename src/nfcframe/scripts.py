# filename : scripts.py
# created  : 10/19/2026


import logging

import click

from nfcframe.core.base import DEFAULT_SOURCE
from nfcframe.core.reader.logging import PROTOCOL, TRACE

lg = logging.getLogger(__name__)


@click.command()
@click.argument("chunks", nargs=-1)
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show raw chunks).")
@click.option(
    "-p",
    "--protocol",
    type=click.Choice(["d600", "springcore"]),
    default="d600",
    show_default=True,
    help="Reader framing: D600 simple frames or SpringCore APDU/TLV.",
)
@click.option(
    "-s",
    "--source",
    default=DEFAULT_SOURCE,
    show_default=True,
    help="Source id the chunks are tagged with.",
)
@click.option(
    "-f",
    "--file",
    "file",
    type=click.Path(exists=True),
    default=None,
    help="Run commands from a script file.",
)
@click.option(
    "-i",
    "--interactive",
    is_flag=True,
    help="Interactive REPL.",
)
def nfcframe(chunks, verbose, protocol, source, file, interactive):
    """Reassemble and decode NFC reader frames from hex CHUNKS."""

    logging.basicConfig(
        level=TRACE if verbose else PROTOCOL,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    from nfcframe.app.main import main
    if not main(protocol=protocol, chunks=chunks, source=source,
                file=file, interactive=interactive):
        raise SystemExit(1)
