"""
Workflow-command annotations (``::error title=...::message``).

The runner parses these from stdout.  A raw newline would end the
command early and a raw ``%`` would be read as an escape, so the
message is percent-encoded first.
"""

from __future__ import annotations

# Order matters: "%" must go first or it re-escapes the others.
_ESCAPES = (
    ("%", "%25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
)


def escape_message(value: object) -> str:
    """Percent-encode ``%``, ``\\r`` and ``\\n``, in that order."""
    text = str(value)
    for raw, encoded in _ESCAPES:
        text = text.replace(raw, encoded)
    return text


def format_error_annotation(title: str, message: object) -> str:
    """Build a single ``::error`` line (no trailing newline)."""
    return f"::error title={title}::{escape_message(message)}"
