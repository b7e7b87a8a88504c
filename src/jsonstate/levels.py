"""Severity scale for state levels.

Levels are stored as raw integers.  Each named band covers the half-open
interval ``[band, band + 100)``; ``PANIC`` has no upper bound.  Values inside
a band (e.g. an info hint at ``210``) are valid and render with the band's
name.
"""

from __future__ import annotations

import enum


class Severity(enum.IntEnum):
    """Lower bounds of the eight severity bands, in increasing severity."""

    UNKNOWN = 0  # includes 'loading' and 'not applicable'
    DISABLED = 100  # manually disabled
    OK = 200  # may carry an optimization hint or info message
    ATTENTION = 300  # something may go wrong in the future
    WARNING = 400  # went wrong, little effect on core functionality
    ERROR = 500  # affects core functionality, may recover automatically
    FAULT = 600  # cannot recover automatically, manual intervention required
    PANIC = 700  # consequences uncertain, assume the worst

    @property
    def label(self) -> str:
        """Human-readable band name (``"OK"``, ``"Warning"``, ...)."""
        return _LABELS[self]


_LABELS: dict[Severity, str] = {
    Severity.UNKNOWN: "Unknown",
    Severity.DISABLED: "Disabled",
    Severity.OK: "OK",
    Severity.ATTENTION: "Attention",
    Severity.WARNING: "Warning",
    Severity.ERROR: "Error",
    Severity.FAULT: "Fault",
    Severity.PANIC: "Panic",
}

STATE_UNKNOWN = int(Severity.UNKNOWN)
STATE_DISABLED = int(Severity.DISABLED)
STATE_OK = int(Severity.OK)
STATE_ATTENTION = int(Severity.ATTENTION)
STATE_WARNING = int(Severity.WARNING)
STATE_ERROR = int(Severity.ERROR)
STATE_FAULT = int(Severity.FAULT)
STATE_PANIC = int(Severity.PANIC)


def band(level: int) -> Severity:
    """Return the :class:`Severity` band containing *level*.

    Every integer maps to exactly one band; negative values fall into
    ``UNKNOWN`` and anything from ``700`` upwards is ``PANIC``.
    """
    for member in reversed(Severity):
        if level >= member:
            return member
    return Severity.UNKNOWN


def band_name(level: int) -> str:
    """Return the name of the band containing *level*."""
    return band(level).label
