"""Plain-text rendering of decoded records for the log."""

from __future__ import annotations

from dataclasses import fields, is_dataclass

from nfcframe.core.reader.types import Known, Unknown


def format_record(record, indent: int = 1) -> str:
    """Render a record as ``name value`` lines, nested dataclasses indented."""
    prefix = "  " * indent
    lines = []
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        if is_dataclass(value) and not isinstance(value, (Known, Unknown)):
            lines.append(f"{prefix}{f.name}:")
            lines.append(format_record(value, indent + 1))
        else:
            lines.append(f"{prefix}{f.name:24s} {value}")
    return "\n".join(lines)
