"""Reader data session: feed chunks, run a script, or open a REPL."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from nfcframe.app.runner import Runner
from nfcframe.core.base import DEFAULT_SOURCE, Accumulator

lg = logging.getLogger(__name__)


def session(
    accumulator: Accumulator,
    chunks: Sequence[str] = (),
    source: str = DEFAULT_SOURCE,
    file: str | None = None,
    interactive: bool = False,
) -> bool:
    """Feed *chunks*, then run *file*, then the REPL if asked or idle.

    Returns False if any chunk or script command failed.
    """
    runner = Runner(accumulator, source=source)

    ok = runner.run_chunks(chunks)
    if ok and file:
        ok = runner.run_file(file)
    if interactive or not (chunks or file):
        runner.run_interactive()

    for src in accumulator.sources():
        lg.warning("[%s] incomplete frame, %d bytes left", src, accumulator.buffered(src))
    return ok
