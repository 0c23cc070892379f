from __future__ import annotations

import logging

TRACE = 15
PROTOCOL = 18
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(PROTOCOL, "PROTOCOL")

LINE_BYTES = 16


def log_hex(logger: logging.Logger, prefix: str, data: bytes) -> None:
    """Log hex data at TRACE, wrapping at LINE_BYTES bytes per line."""
    if not logger.isEnabledFor(TRACE):
        return
    pad = " " * len(prefix)
    for i in range(0, len(data), LINE_BYTES):
        chunk = data[i : i + LINE_BYTES].hex(" ").upper()
        logger.log(TRACE, "%s%s", prefix if i == 0 else pad, chunk)
