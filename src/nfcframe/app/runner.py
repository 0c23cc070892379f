"""Runner: feeds reader chunks into one accumulator and logs the records."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable

from nfcframe.app.display import format_record
from nfcframe.core.base import DEFAULT_SOURCE, Accumulator
from nfcframe.core.reader import FrameError

lg = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"quit", "exit"})

_TRUE = ("true", "yes", "1")


def parse_command(line: str) -> tuple[str, dict[str, str]] | None:
    """Split ``name key=value ...`` into (name, kwargs).

    Blank and ``#`` comment lines give None. A bare word is ``word="true"``.
    """
    stripped = line.split("#", 1)[0].strip()
    if not stripped:
        return None
    name, *args = shlex.split(stripped)
    kwargs = {}
    for arg in args:
        key, _, value = arg.partition("=")
        kwargs[key] = value if "=" in arg else "true"
    return name, kwargs


class Runner:
    """Drives an Accumulator from command lines.

    Commands: ``feed data=HEX [source=ID]``, ``reset [source=ID]``,
    ``pending`` and ``set source=ID|stop_on_error=BOOL|log=LEVEL``.
    Decoded records are kept in arrival order.
    """

    def __init__(self, accumulator: Accumulator, source: str = DEFAULT_SOURCE) -> None:
        self._accumulator = accumulator
        self._source = source
        self._records: list = []
        self._stop_on_error = True
        self._commands = {
            "feed": self.feed,
            "reset": self.reset,
            "pending": self.pending,
            "set": self.configure,
        }

    @property
    def source(self) -> str:
        return self._source

    @property
    def records(self) -> list:
        """Records decoded so far, oldest first."""
        return list(self._records)

    # --- Commands ---

    def feed(self, data: str, source: str = "") -> bool:
        """Submit one hex chunk; log the record if it completes a frame."""
        src = source or self._source
        try:
            record = self._accumulator.feed(data, src)
        except FrameError as exc:
            lg.error("[%s] %s: %s", src, type(exc).__name__, exc)
            return False
        if record is None:
            lg.info("[%s] pending, %d bytes buffered", src, self._accumulator.buffered(src))
            return True
        self._records.append(record)
        lg.info("[%s] %s\n%s", src, type(record).__name__, format_record(record))
        return True

    def reset(self, source: str = "") -> bool:
        """Drop the partial frame held for a source."""
        src = source or self._source
        dropped = self._accumulator.buffered(src)
        self._accumulator.reset(src)
        lg.info("[%s] reset, %d bytes dropped", src, dropped)
        return True

    def pending(self) -> bool:
        """Log every source holding a partial frame."""
        sources = self._accumulator.sources()
        if not sources:
            lg.info("no partial frames")
        for src in sources:
            lg.info("[%s] %d bytes buffered", src, self._accumulator.buffered(src))
        return True

    def configure(self, source: str | None = None, stop_on_error: str | None = None,
                  log: str | None = None) -> bool:
        """Change the default source, error policy or root log level."""
        if source is not None:
            self._source = source
            lg.info("source = %s", source)
        if stop_on_error is not None:
            self._stop_on_error = stop_on_error.lower() in _TRUE
            lg.info("stop_on_error = %s", self._stop_on_error)
        if log is not None:
            level = logging.getLevelName(log.upper())
            if not isinstance(level, int):
                lg.warning("unknown log level: %s", log)
                return False
            logging.getLogger().setLevel(level)
        return True

    # --- Execution ---

    def execute(self, line: str) -> bool:
        """Run one command line. Returns True on success."""
        parsed = parse_command(line)
        if parsed is None:
            return True
        name, kwargs = parsed
        command = self._commands.get(name)
        if command is None:
            lg.error("unknown command: %s", name)
            return False
        try:
            return command(**kwargs)
        except TypeError as exc:
            lg.error("bad arguments for '%s': %s", name, exc)
            return False

    def run_chunks(self, chunks: Iterable[str]) -> bool:
        """Feed hex chunks in order to the current source."""
        ok = True
        for chunk in chunks:
            if not self.feed(chunk):
                ok = False
                if self._stop_on_error:
                    break
        return ok

    def run_lines(self, lines: Iterable[str]) -> bool:
        """Execute command lines until one fails under stop_on_error."""
        ok = True
        for i, line in enumerate(lines, 1):
            parsed = parse_command(line)
            if parsed is not None and parsed[0] in EXIT_COMMANDS:
                break
            if not self.execute(line):
                ok = False
                if self._stop_on_error:
                    lg.error("stopped at line %d: %s", i, line.strip())
                    break
        return ok

    def run_file(self, path: str) -> bool:
        """Execute a capture script, one command per line."""
        with open(path) as f:
            return self.run_lines(f)

    def run_interactive(self, prompt: str = "nfcframe> ") -> None:
        """Read commands from stdin until quit, exit or EOF."""
        lg.info("interactive mode, 'quit' to exit")
        while True:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                return
            parsed = parse_command(line)
            if parsed is not None and parsed[0] in EXIT_COMMANDS:
                return
            self.execute(line)
