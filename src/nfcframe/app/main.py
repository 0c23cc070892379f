# filename : main.py
# created  : 10/19/2026


import logging

from nfcframe.app.session import session
from nfcframe.core.base import DEFAULT_SOURCE
from nfcframe.core.d600 import D600Accumulator
from nfcframe.core.springcore import SpringCoreAccumulator

lg = logging.getLogger(__name__)

PROTOCOLS = {
    "d600": D600Accumulator,
    "springcore": SpringCoreAccumulator,
}


def main(
    protocol: str = "d600",
    chunks: tuple[str, ...] = (),
    source: str = DEFAULT_SOURCE,
    file: str | None = None,
    interactive: bool = False,
) -> bool:
    lg.debug("nfcframe v1, protocol %s", protocol)
    return session(PROTOCOLS[protocol](), chunks=chunks, source=source,
                   file=file, interactive=interactive)
